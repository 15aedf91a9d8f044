"""Starter .porcelain.toml template."""

DEFAULT_TOML = """\
# porcelain configuration
version = "1.0"

[status]
untracked = "all"         # all | normal | no
ignored = false           # also list ignored files
timeout = 30              # seconds before git status is abandoned

[output]
format = "terminal"       # terminal | json | yaml
show_branch = true
show_summary = true
"""
