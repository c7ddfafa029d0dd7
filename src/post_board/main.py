"""
Main Controller Module

Entry point for the Post Board client. Wires the store, the creation
form, the edit session and the delete confirmation into one controller
and drives it from a simple console loop:

1. Load the first posts from the API
2. Render the board
3. Read a command, apply it, render again
"""

import logging
import shlex
import sys
from typing import Callable, Optional

from .config import config
from .api import APIClient, Post
from .forms import NewPostForm
from .session import DeleteConfirmation, EditSession
from .store import ConfirmCallback, PostStore
from .view import render_board


CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def setup_logging(log_level: str = "INFO", log_to_file: bool = True) -> logging.Logger:
    """
    Configure the "post_board" logger.

    The console follows ``log_level``; the log file always records DEBUG.
    Handlers left by an earlier call are replaced, not stacked.

    Args:
        log_level: Console level name, e.g. "INFO".
        log_to_file: Also write ``config.log.log_file_path``.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("post_board")
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [(
        logging.StreamHandler(sys.stdout),
        log_level,
        logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"),
    )]
    if log_to_file:
        log_path = config.log.log_file_path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append((
            logging.FileHandler(log_path, mode="w", encoding="utf-8"),
            "DEBUG",
            logging.Formatter(config.log.log_format),
        ))

    for handler, level, formatter in handlers:
        handler.setLevel(level.upper())
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


class PostBoard:
    """
    Controller owning all client-side state of the board.

    There is one store, one creation form, at most one edit session and
    at most one pending delete confirmation. The controller is passed
    explicitly to whatever renders it.
    """

    def __init__(self, api: Optional[APIClient] = None):
        """
        Initialize the board.

        Args:
            api: Client for the remote resource (a default one is created if None).
        """
        self.logger = logging.getLogger("post_board.main")
        self.store = PostStore(api)
        self.form = NewPostForm()
        self.session = EditSession()
        self.pending_delete: Optional[DeleteConfirmation] = None

        self.logger.info("PostBoard initialized")

    def load(self) -> None:
        self.store.load()

    def find_post(self, post_id: int) -> Optional[Post]:
        return self.store.get(post_id)

    # Creation form

    def set_new_field(self, name: str, value: str) -> None:
        self.form.set_field(name, value)

    def create(self) -> bool:
        """Validate the creation form and submit it if valid."""
        return self.form.submit(self.store)

    # Editing

    def start_edit(self, post_id: int) -> bool:
        """
        Open an edit session on a listed post.

        Returns:
            False if no post with this id is listed.
        """
        post = self.find_post(post_id)
        if post is None:
            self.logger.warning(f"Cannot edit unknown post {post_id}")
            return False

        self.session.start(post)
        return True

    def set_edit_field(self, name: str, value: str) -> None:
        self.session.set_field(name, value)

    def save_edit(self) -> bool:
        """Save the open edit; the session stays open if the update fails."""
        if not self.session.is_active:
            return False
        if self.find_post(self.session.post_id) is None:
            self.logger.warning(f"Post {self.session.post_id} is no longer listed")
            return False
        return self.session.save(self.store)

    def cancel_edit(self) -> None:
        self.session.cancel()

    # Deletion

    def delete(self, post_id: int, confirm: ConfirmCallback) -> bool:
        """
        Delete a post, asking ``confirm`` synchronously first.

        Returns:
            True if the post was removed.
        """
        if self.find_post(post_id) is None:
            self.logger.warning(f"Cannot delete unknown post {post_id}")
            return False

        deleted = self.store.delete(post_id, confirm)
        if deleted and self.session.is_editing(post_id):
            self.session.close()
        return deleted

    def request_delete(self, post_id: int) -> Optional[DeleteConfirmation]:
        """
        First step of a non-blocking deletion: open a pending confirmation.

        Any confirmation still pending is cancelled first.
        """
        if self.find_post(post_id) is None:
            self.logger.warning(f"Cannot delete unknown post {post_id}")
            return None

        if self.pending_delete is not None and self.pending_delete.is_pending:
            self.pending_delete.resolve(False)

        self.pending_delete = DeleteConfirmation(post_id)
        return self.pending_delete

    def resolve_delete(self, answer: bool) -> bool:
        """
        Second step: apply the operator's answer to the pending deletion.

        Returns:
            True if the post was removed.
        """
        pending = self.pending_delete
        if pending is None:
            return False

        self.pending_delete = None
        return self.delete(pending.post_id, lambda prompt: pending.resolve(answer))


def console_confirm(prompt: str, input_fn: Callable[[str], str] = input) -> bool:
    """Blocking yes/no question on the console."""
    answer = input_fn(f"{prompt} [y/N] ")
    return answer.strip().lower() in ("y", "yes")


HELP_TEXT = """Commands:
  title <text>        set the new post title
  body <text>         set the new post content
  add                 create the post
  edit <id>           start editing a post
  set-title <text>    change the title being edited
  set-body <text>     change the content being edited
  save | cancel       finish editing
  delete <id>         delete a post
  help | quit"""


def run_console(
    board: PostBoard,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print
) -> None:
    """
    Read commands until "quit" or end of input, rendering after each one.

    Args:
        board: Controller to drive.
        input_fn: Source of command lines.
        output: Sink for rendered text.
    """
    output(render_board(board))

    while True:
        try:
            line = input_fn("> ")
        except EOFError:
            break

        try:
            parts = shlex.split(line)
        except ValueError as e:
            output(f"Invalid command: {e}")
            continue
        if not parts:
            continue

        command, args = parts[0].lower(), parts[1:]
        text = " ".join(args)

        if command == "quit":
            break
        elif command == "help":
            output(HELP_TEXT)
            continue
        elif command in ("title", "body"):
            board.set_new_field(command, text)
        elif command == "add":
            board.create()
        elif command in ("set-title", "set-body"):
            board.set_edit_field(command.split("-", 1)[1], text)
        elif command == "save":
            board.save_edit()
        elif command == "cancel":
            board.cancel_edit()
        elif command in ("edit", "delete"):
            if len(args) != 1 or not args[0].isdecimal():
                output(f"Usage: {command} <id>")
                continue
            post_id = int(args[0])
            if command == "edit":
                board.start_edit(post_id)
            else:
                board.delete(post_id, lambda prompt: console_confirm(prompt, input_fn))
        else:
            output(f"Unknown command: {command} (try 'help')")
            continue

        output(render_board(board))


def main():
    """Main entry point for the Post Board client."""
    logger = setup_logging(config.log.log_level)

    try:
        board = PostBoard()
        if not board.store.api.test_connection():
            logger.warning("API connection test failed (may work anyway)")
        board.load()
        run_console(board)
        sys.exit(0)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)

    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
