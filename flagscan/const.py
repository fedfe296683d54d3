import os

VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

ARGV0 = "flagscan"
DESCRIPTION = "A low-level command-line argument classifier"

# Leading character of flag-like tokens, "-a" and "--all" alike.
FLAG_PREFIX = "-"

EXTRA_ARGS_ENV = "FLAGSCAN_EXTRA_ARGS"
GLOBAL_LOG_FILE = os.path.join(os.path.expanduser("~"), ".flagscan", "flagscan.log")
