"""
Hook runners invoked by git.

Each module exposes run(...) returning the exit status git expects
(0 allows the operation, 1 blocks it) and main() for the launcher scripts
under .githooks/.
"""
