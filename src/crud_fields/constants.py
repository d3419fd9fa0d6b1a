"""
Constants shared across crud-fields.
"""

import re

# Valid field identifier pattern (alphanumeric + underscore)
VALID_IDENTIFIER = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

# Max identifier length accepted by Field
MAX_IDENTIFIER_LENGTH = 100

# Separator used by pipe-delimited rule strings ("required|min:3")
RULE_SEPARATOR = "|"

# Separator between a rule name and its parameters ("min:3")
RULE_PARAMETER_SEPARATOR = ":"
