import os

# /* ~~~ result rendering ~~~ */
RESULT_SEPARATOR: str = ", "
NO_RESULTS_TEXT: str = "No results found."
INVALID_TERM_TEXT: str = "Invalid search term."

# name files picked up when a directory is given
NAME_FILE_EXTS = (".txt",)
ENCODING: str = "utf-8"

# /* ~~~ batch search: threads per search_many() call ~~~ */
WORKERS: int = min(8, os.cpu_count() or 4)

# Progress logging (set PHONETIC_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("PHONETIC_VERBOSE") == "1"

# web UI
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000
