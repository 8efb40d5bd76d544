#!/usr/bin/env python3
"""gitscope CLI entrypoint.

Exit codes: 0 = success / yes, 1 = no, 2 = error.
"""

import sys
import logging
import argparse
from pathlib import Path

from gitscope import git
from gitscope.lib.config import load_git_config, set_git_config
from gitscope.lib.validate import ValidationError


def _answer(flag: bool) -> int:
    print("yes" if flag else "no")
    return 0 if flag else 1


def cmd_is_repo(args):
    return _answer(git.is_repository(args.path))


def cmd_remotes(args):
    for remote in git.list_remotes(args.path):
        print(remote)
    return 0


def cmd_branch(args):
    name = git.current_branch(args.path)
    if name is None:
        print("(detached)")
        return 1
    print(name)
    return 0


def cmd_modified(args):
    return _answer(git.is_modified(args.path))


def cmd_compare(args):
    print(git.compare(args.lhs, args.rhs, args.path))
    return 0


def cmd_upstream(args):
    upstream = git.tracked_upstream(args.path, args.branch)
    if upstream is None:
        print(f"{args.branch} has no upstream")
        return 1
    print(upstream)
    return 0


def cmd_sync(args):
    git.sync(args.url, args.path, args.branch)
    print(f"Synced {args.path}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(prog='gitscope', description='Probe and sync git working copies')
    parser.add_argument('--config', '-c', type=Path, help='Settings file (KEY=value)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log every git command')
    subparsers = parser.add_subparsers(dest='command', required=True)

    p_is_repo = subparsers.add_parser('is-repo', help='Check whether PATH is a repository')
    p_is_repo.add_argument('path')
    p_is_repo.set_defaults(func=cmd_is_repo)

    p_remotes = subparsers.add_parser('remotes', help='List remotes')
    p_remotes.add_argument('path')
    p_remotes.set_defaults(func=cmd_remotes)

    p_branch = subparsers.add_parser('branch', help='Show current branch')
    p_branch.add_argument('path')
    p_branch.set_defaults(func=cmd_branch)

    p_modified = subparsers.add_parser('modified', help='Check for modified tracked files')
    p_modified.add_argument('path')
    p_modified.set_defaults(func=cmd_modified)

    p_compare = subparsers.add_parser('compare', help='Commits LHS is ahead (+) or behind (-) RHS')
    p_compare.add_argument('lhs')
    p_compare.add_argument('rhs')
    p_compare.add_argument('path')
    p_compare.set_defaults(func=cmd_compare)

    p_upstream = subparsers.add_parser('upstream', help='Show the upstream BRANCH tracks')
    p_upstream.add_argument('path')
    p_upstream.add_argument('branch')
    p_upstream.set_defaults(func=cmd_upstream)

    p_sync = subparsers.add_parser('sync', help='Clone URL into PATH, or pull if already cloned')
    p_sync.add_argument('url')
    p_sync.add_argument('path')
    p_sync.add_argument('--branch', '-b', help='Branch to pull (default from config)')
    p_sync.set_defaults(func=cmd_sync)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        set_git_config(load_git_config(args.config))
    except (FileNotFoundError, ValueError, ValidationError) as e:
        print(f"ERROR: Invalid configuration: {e}", file=sys.stderr)
        return 2

    try:
        return args.func(args)
    except git.GitError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
