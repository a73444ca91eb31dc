"""
Resolve the Clerk user id used to authenticate against the task API.

The id is read from the config file; on first run the user is asked for it
and the answer is cached for next time.
"""

from rich.console import Console

from .prompts import SETUP_INSTRUCTIONS, USER_ID_QUESTION, InputSource
from .storage import ConfigStore


class IdentityError(Exception):
    """Raised when no user id is stored and the user did not enter one."""
    pass


def resolve_user_id(store: ConfigStore, ask: InputSource, console: Console) -> str:
    """
    Return the cached user id, prompting for it once if it is missing.

    Saving the entered id is best-effort: if it fails the user is told and
    the current command continues with the id anyway.

    Args:
        store: Where the id is cached
        ask: Source of the interactive answer
        console: Where setup instructions and save results are printed

    Returns:
        The user id (never empty)

    Raises:
        IdentityError: If no id is stored and the answer was empty
    """
    config = store.load()

    if config.has_user_id:
        return config.user_id

    console.print(SETUP_INSTRUCTIONS)
    user_id = ask.ask(USER_ID_QUESTION).strip()

    if not user_id:
        raise IdentityError("User ID is required to use this CLI tool.")

    config.user_id = user_id
    if store.save(config):
        console.print("[green]✅ User ID saved successfully![/green]\n")
    else:
        console.print(
            "[red]❌ Failed to save user ID. "
            "You'll need to enter it again next time.[/red]\n"
        )

    return user_id
