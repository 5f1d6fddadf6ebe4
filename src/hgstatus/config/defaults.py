"""Starter .hgstatus.toml template."""

DEFAULT_TOML = """\
# hgstatus configuration
version = "1.0"

[hg]
executable = "hg"
timeout = 30              # seconds per hg invocation

[status]
include_ignored = false   # also list ignored files
show_parent = true        # show what the working parent changed

[output]
format = "terminal"       # terminal | json
show_empty_groups = false
show_summary = true

[staging]
state_file = ".hg/hgstatus-staging.json"
"""
