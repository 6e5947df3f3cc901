# services/notifier.py
"""
Ways a tenant can be notified.

Every notifier implements notify(to, message); "to" must be in the format the
notifier expects (an email address for EmailNotifier, a phone number for SMS).
Delivery failures raise NotifyError.
"""
import logging

import config
from utils.email import EmailError, send_email
from .errors import NotifyError

logger = logging.getLogger(__name__)


class Notifier:
     """Sends a message to a recipient."""

     def notify(self, to: str, message: str) -> None:
          raise NotImplementedError


class ConsoleNotifier(Notifier):
     """Prints notifications to stdout (for debugging)."""

     def notify(self, to: str, message: str) -> None:
          print(f"[{to}]: {message}")
          logger.info("Notified %s via console", to)


class EmailNotifier(Notifier):
     """Sends notifications as plain-text email through the Brevo API."""

     def __init__(self, api_key: str = None, subject: str = "Account notice"):
          self.api_key = api_key or config.BREVO_API_KEY
          self.subject = subject

     def notify(self, to: str, message: str) -> None:
          try:
               send_email(to, self.subject, message, api_key=self.api_key)
          except EmailError as e:
               raise NotifyError(f"emailing {to}: {e}") from e
          logger.info("Notified %s via email", to)


class SMSNotifier(Notifier):

     def notify(self, to: str, message: str) -> None:
          raise NotifyError("sms notifications are unimplemented")


NOTIFIERS = {
     "console": ConsoleNotifier,
     "email": EmailNotifier,
     "sms": SMSNotifier,
}


def build_notifier(name: str = None) -> Notifier:
     """Notifier selected by name (defaults to config.NOTIFIER)."""
     name = (name or config.NOTIFIER).lower()
     try:
          return NOTIFIERS[name]()
     except KeyError:
          raise ValueError(f"Unknown notifier: {name!r}") from None
