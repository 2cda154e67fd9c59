VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

ARGV0 = "argv"
DESCRIPTION = "Schema-less command-line argument parsing with lenient type coercion"
EXTRA_ARGS_ENV = "ARGV_EXTRA_ARGS"
