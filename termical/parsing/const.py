"""Constants for termical parsing library."""

# Related to rfc5545 text parsing
FOLD = r"(?:\r?\n[ \t\r]+)+"
LINES = r"\r?\n"
NAME_SEP = ":"
PARAM_SEP = ";"
PARAM_VALUE_SEP = "="
ATTR_BEGIN = "BEGIN"
ATTR_END = "END"
