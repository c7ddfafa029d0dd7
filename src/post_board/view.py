"""
Text View Module

Renders the board state as plain text. The view only reads state; it
never changes it.
"""

from typing import TYPE_CHECKING, List

from .api import Post
from .config import config
from .forms.validator import FIELDS

if TYPE_CHECKING:
    from .main import PostBoard


def render_board(board: "PostBoard") -> str:
    """
    Render the whole board.

    Args:
        board: Controller whose state is shown.

    Returns:
        Multi-line text: the loading text while loading, otherwise the
        heading, the creation form and the post list.
    """
    view = config.view
    if board.store.is_loading:
        return view.loading_text

    lines = [view.heading, "=" * len(view.heading), ""]
    lines.extend(_render_form(board))
    lines.append("")

    for post in board.store.posts:
        lines.extend(_render_post(board, post))
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def _render_form(board: "PostBoard") -> List[str]:
    form = board.form
    lines = []
    for name in FIELDS:
        value = getattr(form.draft, name)
        lines.append(f"{name.capitalize()}: {value}")
        message = form.errors.get(name)
        if message:
            lines.append(config.view.error_template.format(message=message))
    lines.append(f"[{form.button_label}]")
    return lines


def _render_post(board: "PostBoard", post: Post) -> List[str]:
    if board.session.is_editing(post.id):
        draft = board.session.display(post)
        return [
            f"#{post.id} (editing)",
            f"    Title: {draft.title}",
            f"    Body: {draft.body}",
            "    [Save] [Cancel]",
        ]

    text = config.view.post_template.format(id=post.id, title=post.title, body=post.body)
    return text.splitlines() + ["    [Edit] [Delete]"]
