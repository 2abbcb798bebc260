#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import getpass
import json
import logging
import sys
from typing import List, Optional

import requests

from .client import HackOrSnooze
from .config import load_config, setup_logging
from .datamodels import Story, User
from .schemas import PayloadError

logger = logging.getLogger("hack_or_snooze")


def _format_story(story: Story) -> str:
    return f"{story.story_id}  {story.title} ({story.url}) by {story.author}"


def _require_user(client: HackOrSnooze) -> User:
    user = client.stay_logged_in()
    if user is None:
        raise SystemExit("Not logged in. Run 'hack-or-snooze login' first.")
    return user


def _password(args: argparse.Namespace) -> str:
    return args.password or getpass.getpass("Password: ")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hack or Snooze client")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("stories", help="List the latest stories")

    signup = sub.add_parser("signup", help="Create an account and log in")
    signup.add_argument("username")
    signup.add_argument("name", help="Display name, used as author of your stories")
    signup.add_argument("--password")

    login = sub.add_parser("login", help="Log in and remember the session")
    login.add_argument("username")
    login.add_argument("--password")

    sub.add_parser("whoami", help="Show the logged-in user")

    post = sub.add_parser("post", help="Submit a story")
    post.add_argument("title")
    post.add_argument("url")

    fav = sub.add_parser("favorite", help="Mark a story as a favorite")
    fav.add_argument("story_id")

    unfav = sub.add_parser("unfavorite", help="Remove a story from favorites")
    unfav.add_argument("story_id")

    sub.add_parser("logout", help="Forget the stored session")
    return parser


def run(args: argparse.Namespace, client: HackOrSnooze) -> None:
    if args.command == "stories":
        for story in client.get_stories().stories:
            print(_format_story(story))
    elif args.command == "signup":
        user = client.create_user(args.username, _password(args), args.name)
        print(f"Signed up as {user.username}")
    elif args.command == "login":
        user = client.login(args.username, _password(args))
        print(f"Logged in as {user.username}")
    elif args.command == "whoami":
        user = _require_user(client)
        print(f"{user.username} ({user.name})")
        print(f"{len(user.own_stories)} stories, {len(user.favorites)} favorites")
        for story in user.favorites:
            print(f"* {_format_story(story)}")
    elif args.command == "post":
        user = _require_user(client)
        story = client.add_story(user, {"title": args.title, "url": args.url})
        print(f"Posted {_format_story(story)}")
    elif args.command == "favorite":
        user = _require_user(client)
        print(json.dumps(client.add_favorite(user, args.story_id), indent=2))
    elif args.command == "unfavorite":
        user = _require_user(client)
        print(json.dumps(client.remove_favorite(user, args.story_id), indent=2))
    elif args.command == "logout":
        client.logout()
        print("Logged out")


# --- Entrypoint ---
def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    debug_path = setup_logging(args.debug)
    if debug_path:
        print(f"Debug logging enabled: {debug_path}", file=sys.stderr)

    client = HackOrSnooze(config=load_config())
    try:
        run(args, client)
    except (requests.RequestException, PayloadError) as e:
        logger.exception("Command %s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
