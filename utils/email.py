# utils/email.py
import requests

import config

BREVO_URL = "https://api.brevo.com/v3/smtp/email"


class EmailError(Exception):
     """Raised when an email could not be handed to the provider."""


def send_email(to_email: str, subject: str, text: str, api_key: str = None):
     api_key = api_key or config.BREVO_API_KEY
     if not api_key:
          raise EmailError("BREVO_API_KEY is not set")

     try:
          response = requests.post(
               BREVO_URL,
               headers={
                    "api-key": api_key,
                    "Content-Type": "application/json",
               },
               json={
                    "sender": {"name": config.EMAIL_SENDER_NAME, "email": config.EMAIL_SENDER_ADDRESS},
                    "to": [{"email": to_email}],
                    "subject": subject,
                    "textContent": text,
               },
               timeout=10,
          )
     except requests.RequestException as e:
          raise EmailError(f"Brevo request failed: {e}") from e
     if response.status_code not in (200, 201):
          raise EmailError(f"Brevo error: {response.text}")
