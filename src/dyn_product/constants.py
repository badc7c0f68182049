# Config file location, relative to the user's home directory
CONFIG_DIR_NAME = ".dynprod"
CONFIG_FILE_NAME = "config.toml"

# Inline rows are given as one CLI argument per row, items split on this
DEFAULT_INPUT_SEPARATOR = ","

# Items of a combination are joined with this in text output
DEFAULT_OUTPUT_SEPARATOR = " "

# 0 means print every combination
DEFAULT_LIMIT = 0

# Rows file formats understood by rows.load_rows_file
ROWS_FILE_SUFFIXES = (".toml", ".json")
