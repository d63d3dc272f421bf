"""Exit status constants shared by commands and the shell loop."""

EXIT_CODE_SUCCESS = 0
EXIT_CODE_FAILURE = 1
EXIT_CODE_USAGE = 2

# Conventional POSIX statuses for unrunnable and unknown commands
EXIT_CODE_CANNOT_EXECUTE = 126
EXIT_CODE_NOT_FOUND = 127
