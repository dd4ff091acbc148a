#!python3 -X utf8

# Usage: python find_missing_developers.py LOG_FILE
#
# LOG_FILE holds the output of `git log`; every commit in it is checked for an
# "Author:" and a "Signed-off-by:" value.

if __name__ == '__main__':
    from commitlog.cli import run
    run()
