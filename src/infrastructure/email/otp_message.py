"""Verification email content shared by all email adapters."""

OTP_EMAIL_SUBJECT = "Email Verification - OTP"


def build_otp_email_body(otp_code: str, expires_in_seconds: int) -> str:
    """Render the plain-text verification email.

    Args:
        otp_code: One-time code to deliver.
        expires_in_seconds: Code lifetime, rounded down to minutes for display.

    Returns:
        str: Email body text.
    """
    minutes = max(expires_in_seconds // 60, 1)
    unit = "minute" if minutes == 1 else "minutes"
    return (
        f"Your OTP for email verification is: {otp_code}\n\n"
        f"This OTP will expire in {minutes} {unit}.\n\n"
        "If you didn't request this, please ignore this email."
    )
