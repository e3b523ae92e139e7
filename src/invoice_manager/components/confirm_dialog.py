"""Confirmation dialog shared by the list and editor delete actions."""

import reflex as rx
from reflex.event import EventHandler


def confirm_dialog(
    title: str,
    description: str,
    is_open: rx.Var,
    on_confirm: EventHandler,
    on_cancel: EventHandler,
) -> rx.Component:
    """
    Build an alert dialog asking the user to confirm a destructive action.

    Args:
        title: Dialog heading.
        description: Explanation shown below the heading.
        is_open: Boolean state var controlling visibility.
        on_confirm: Handler run when the user confirms.
        on_cancel: Handler run when the user backs out.
    """
    return rx.alert_dialog.root(
        rx.alert_dialog.content(
            rx.alert_dialog.title(title),
            rx.alert_dialog.description(description),
            rx.hstack(
                rx.alert_dialog.cancel(
                    rx.button("Cancel", variant="soft", color_scheme="gray"),
                    on_click=on_cancel,
                ),
                rx.alert_dialog.action(
                    rx.button("Yes, delete it!", color_scheme="red"),
                    on_click=on_confirm,
                ),
                spacing="3",
                justify="end",
                margin_top="16px",
            ),
        ),
        open=is_open,
    )
