from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from django.conf import settings
from django.core.mail import send_mail
from django.utils.html import escape

if TYPE_CHECKING:
    from .models import User

logger = logging.getLogger(__name__)


def make_a_nice_email(text: str) -> str:
    return f"""
    <div className="email" style="
        border: 1px solid black;
        padding: 20px;
        font-family: sans-serif;
        line-height: 2;
        font-size: 20px;
    ">
        <h2>Hello There!</h2>
        <p>{text}</p>
        <p>Thanks</p>
    </div>
    """


def reset_url(token: str) -> str:
    base = settings.FRONTEND_URL.rstrip("/")
    return f"{base}/reset?{urlencode({'resetToken': token})}"


def send_reset_email(user: User, token: str) -> int:
    """Mail the password reset link to ``user``.

    Returns the number of delivered messages as reported by the mail backend.
    """
    url = reset_url(token)
    html = make_a_nice_email(
        "Your password reset token is here!"
        f'<br/><br/><a href="{escape(url)}">Click here to reset</a>'
    )

    sent = send_mail(
        subject="Your password reset token",
        message=f"Reset your password here: {url}",
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[user.email],
        html_message=html,
    )
    logger.info("Sent password reset mail to user %s", user.pk)
    return sent
