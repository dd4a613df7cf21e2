"""
This is the main file to run the game.
It imports the main function from the bug_crossing package and runs it.
"""

from bug_crossing.__main__ import main

if __name__ == "__main__":
    main()
