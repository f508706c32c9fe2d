"""Account console commands sent to the game server."""

from __future__ import annotations

from typing import Callable


def priv_set_command(prefix: str, level: int) -> str:
    """Command that sets the account's privilege level."""
    return f"{prefix}privset {int(level)}"


def resdisp_command(prefix: str, resdisp: int) -> str:
    """Command that sets the account's resource display value."""
    return f"{prefix}set account.resdisp {int(resdisp)}"


def set_tag_command(prefix: str, tag: str, value: str) -> str:
    """Command that sets an account tag to a value."""
    return f"{prefix}et account.{tag} {value}"


def get_tag_command(prefix: str, tag: str) -> str:
    """Command that queries an account tag."""
    return f"{prefix}get account.{tag}"


class AccountCommands:
    """Builds account commands and hands them to a sender.

    When ``send`` is None the commands are built but not sent, as when no
    remote console is connected. Every method returns the command text.
    """

    def __init__(self, prefix: str, send: Callable[[str], object] | None = None):
        self.prefix = prefix
        self.send = send

    def _dispatch(self, command: str) -> str:
        if self.send is not None:
            self.send(command)
        return command

    def set_priv_level(self, level: int) -> str:
        return self._dispatch(priv_set_command(self.prefix, level))

    def set_resdisp(self, resdisp: int) -> str:
        return self._dispatch(resdisp_command(self.prefix, resdisp))

    def set_tag(self, tag: str, value: str) -> str:
        return self._dispatch(set_tag_command(self.prefix, tag, value))

    def get_tag(self, tag: str) -> str:
        return self._dispatch(get_tag_command(self.prefix, tag))