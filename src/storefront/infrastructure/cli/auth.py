"""Staff gate for the CLI.

A single shared password unlocks the staff roles.  It is a placeholder
that keeps customers out of the staff screens, not a security boundary.
"""

from __future__ import annotations

import functools
import hmac

import click

from storefront.domain.model.role import Role

ROLE_CHOICE = click.Choice([r.value for r in Role], case_sensitive=False)


def check_staff_password(given: str, expected: str) -> bool:
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def resolve_role(role_name: str, password: str | None) -> Role:
    """Turn ``--role``/``--password`` into a Role, prompting if needed.

    The resolved role is signed in on the session's store context.
    """
    role = Role(role_name.upper())
    store = click.get_current_context().obj
    if role.is_staff:
        if password is None:
            password = click.prompt("Staff password", hide_input=True)
        if not check_staff_password(password, store.settings.staff_password):
            raise click.ClickException("Incorrect staff password")
    store.sign_in(role)
    return role


def password_option(f):
    return click.option(
        "--password",
        envvar="STOREFRONT_PASSWORD",
        default=None,
        help="Staff password (prompted when omitted).",
    )(f)


def role_options(default: str = Role.CUSTOMER.value):
    """Add ``--role`` and ``--password`` and pass the resolved ``role``."""

    def decorator(f):
        @click.option("--role", "role_name", type=ROLE_CHOICE, default=default,
                      show_default=True, help="Acting role.")
        @password_option
        @functools.wraps(f)
        def wrapper(*args, role_name: str, password: str | None, **kwargs):
            return f(*args, role=resolve_role(role_name, password), **kwargs)

        return wrapper

    return decorator


def cashier_only(f):
    """Require the staff password and act as CASHIER."""

    @password_option
    @functools.wraps(f)
    def wrapper(*args, password: str | None, **kwargs):
        resolve_role(Role.CASHIER.value, password)
        return f(*args, **kwargs)

    return wrapper
