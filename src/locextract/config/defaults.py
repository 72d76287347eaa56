"""Starter .locextract.toml template."""

DEFAULT_TOML = """\
# locextract configuration
version = "1.0"

[project]
id = "myapp"
source_locale = "en-US"

[filetype]
datatype = "x-objective-c"
extensions = [".m", ".mm", ".h"]
macro_prefixes = ["NS", "HT"]      # matches NSLocalizedString(...) and HTLocalizedString(...)
macro_name = "LocalizedString"

[scan]
# ignore = ["Pods/*", "build/*"]
fail_on_warnings = false

[output]
format = "terminal"                # terminal | json | sarif
show_summary = true
show_resources = true

[rules]
# enable = ["CONCATENATION_BEFORE_COMMA"]   # empty = all enabled
# disable = ["NON_LITERAL_ARGUMENT"]
# custom_dir = ".locextract-rules"
"""
