DEFAULT_CSS_PREFIX = "css"
CSS_PREFIX_ENV = "KUMITATE_CSS_PREFIX"

INDENT_UNIT = "  "

# tag that marks the synthetic parent of several top-level siblings
ROOT_TAG = "__root__"

# how far back from the cursor a caller looks for a shorthand token
MAX_LOOKBACK = 200

# entry points raise the interpreter limit for deep trees; shorthand
# longer than this is refused so nesting stays well below it
RECURSION_LIMIT = 5000
MAX_SHORTHAND_LENGTH = 2000
