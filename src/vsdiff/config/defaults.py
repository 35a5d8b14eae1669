"""Starter .vsdiff.toml template."""

DEFAULT_TOML = """\
# vsdiff configuration

[diff]
staged = false            # same as always passing --staged
# exclude = ["node_modules", "docs/generated"]

[viewer]
command = ["code", "--diff"]
wait = false              # open pairs one at a time (adds --wait)

[git]
timeout = 30              # seconds per git call
"""
