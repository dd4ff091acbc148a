import sys

from termcolor import colored

###############################################################################
# Output prefixes
###############################################################################

RAW_CROSSMARK = "[✗]"

# Colour is decided when printing: termcolor leaves the text alone when the
# output is not a terminal or NO_COLOR is set.
def _mark(symbol: str, color: str) -> str:
    return '[' + colored(symbol, color) + ']'

def _message(prefix: str, raw_prefix: str, *args):
    msg = '\n'.join(str(arg) for arg in args)
    first = True
    for line in msg.split('\n'):
        if first: print(f"{prefix} {line}")
        else:     print(f"{' ' * len(raw_prefix)} {line}")
        first = False

# Use CROSSMARK for errors
def error(*msg): _message(_mark("✗", "red"), RAW_CROSSMARK, *msg)

# Fatal errors go to stderr, unprefixed
def fatal(*msg):
    for line in '\n'.join(str(arg) for arg in msg).split('\n'):
        print(line, file=sys.stderr)
