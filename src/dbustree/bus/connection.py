# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Blocking D-Bus client built on ``dbus_fast``.

``dbus_fast`` exposes an asyncio API. The connection below owns a private
event loop and runs each remote call to completion, so callers see plain
blocking methods and the rest of the program stays synchronous.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator
from contextlib import contextmanager

from dbus_fast import BusType, Message, MessageType
from dbus_fast.aio import MessageBus
from dbus_fast.errors import (
    AuthError,
    InvalidAddressError,
    InvalidBusNameError,
    InvalidInterfaceNameError,
    InvalidMemberNameError,
    InvalidObjectPathError,
)

from dbustree.bus.provider import ProviderError
from dbustree.introspection.xml import parse_introspection
from dbustree.model.entities import Node

_LOG = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

BUS_NAME = "org.freedesktop.DBus"
BUS_PATH = "/org/freedesktop/DBus"
INTROSPECTABLE_INTERFACE = "org.freedesktop.DBus.Introspectable"
PROPERTIES_INTERFACE = "org.freedesktop.DBus.Properties"


class DBusConnection:
    """A synchronous introspection provider for the session or system bus.

    Use :func:`connect` to obtain an opened connection that is always
    released.
    """

    def __init__(self, bus_type: BusType = BusType.SESSION) -> None:
        self._bus_type = bus_type
        self._loop = asyncio.new_event_loop()
        self._bus: MessageBus | None = None

    def open(self) -> None:
        """Connect and authenticate to the bus.

        Raises:
            ProviderError: If the bus address is unknown, unreachable, or
                authentication fails.
        """
        label = _bus_label(self._bus_type)
        _LOG.debug("Connecting to the %s bus", label)
        try:
            self._bus = self._loop.run_until_complete(_open_bus(self._bus_type))
        except (OSError, EOFError, AuthError, InvalidAddressError) as exc:
            raise ProviderError(f"Cannot connect to the {label} bus: {exc}") from exc

    def close(self) -> None:
        """Disconnect from the bus and release the event loop."""
        bus, self._bus = self._bus, None
        try:
            if bus is not None:
                _LOG.debug("Disconnecting from the %s bus", _bus_label(self._bus_type))
                bus.disconnect()
                try:
                    self._loop.run_until_complete(bus.wait_for_disconnect())
                except (OSError, EOFError) as exc:
                    _LOG.debug("Bus reported an error while disconnecting: %s", exc)
        finally:
            if not self._loop.is_closed():
                self._loop.close()

    def introspect(self, destination: str, path: str) -> Node:
        """Call ``Introspect`` on *path* and parse the returned document."""
        body = self._call(
            destination=destination,
            path=path,
            interface=INTROSPECTABLE_INTERFACE,
            member="Introspect",
        )
        return parse_introspection(body[0])

    def get_property(self, destination: str, path: str, interface: str, name: str) -> object:
        """Call ``Properties.Get`` and return the unwrapped value."""
        body = self._call(
            destination=destination,
            path=path,
            interface=PROPERTIES_INTERFACE,
            member="Get",
            signature="ss",
            body=[interface, name],
        )
        return body[0].value

    def list_names(self) -> list[str]:
        """Call ``ListNames`` on the bus daemon."""
        body = self._call(destination=BUS_NAME, path=BUS_PATH, interface=BUS_NAME, member="ListNames")
        return list(body[0])

    def get_connection_pid(self, name: str) -> int:
        """Call ``GetConnectionUnixProcessID`` on the bus daemon."""
        body = self._call(
            destination=BUS_NAME,
            path=BUS_PATH,
            interface=BUS_NAME,
            member="GetConnectionUnixProcessID",
            signature="s",
            body=[name],
        )
        return int(body[0])

    # ------------------------------------------------------------------
    # Message exchange
    # ------------------------------------------------------------------

    def _call(self, **fields: object) -> list:
        """Send a method call built from *fields* and return the reply body.

        Raises:
            ProviderError: If the connection is not open, the call is
                invalid, the transport fails, or the peer returns an error.
        """
        if self._bus is None:
            raise ProviderError("Not connected to a bus")

        call_label = (
            f"{fields.get('interface')}.{fields.get('member')} "
            f"on {fields.get('destination')} {fields.get('path')}"
        )
        _LOG.debug("Calling %s", call_label)
        try:
            message = Message(**fields)
        except (
            InvalidBusNameError,
            InvalidObjectPathError,
            InvalidInterfaceNameError,
            InvalidMemberNameError,
        ) as exc:
            raise ProviderError(f"Invalid call {call_label}: {exc}") from exc

        try:
            reply = self._loop.run_until_complete(self._bus.call(message))
        except (OSError, EOFError) as exc:
            raise ProviderError(f"{call_label} failed: {exc}") from exc

        if reply is None:
            raise ProviderError(f"{call_label} returned no reply")
        if reply.message_type == MessageType.ERROR:
            if reply.body:
                raise ProviderError(f"{reply.error_name}: {reply.body[0]}")
            raise ProviderError(str(reply.error_name))
        if not reply.body:
            raise ProviderError(f"{call_label} returned an empty reply")
        return reply.body


@contextmanager
def connect(system: bool = False) -> Iterator[DBusConnection]:
    """Open a connection to the session (or system) bus for a ``with`` block.

    The connection is closed on every exit path, including errors raised
    while it is being opened.

    Raises:
        ProviderError: If the connection cannot be established.
    """
    connection = DBusConnection(BusType.SYSTEM if system else BusType.SESSION)
    try:
        connection.open()
        yield connection
    finally:
        connection.close()


# ################
# Implementation
# ################


async def _open_bus(bus_type: BusType) -> MessageBus:
    """Create and connect a MessageBus inside the running loop."""
    return await MessageBus(bus_type=bus_type).connect()


def _bus_label(bus_type: BusType) -> str:
    return "system" if bus_type == BusType.SYSTEM else "session"
