"""
Telegram Bot API replies for the lore webhook
"""
import logging
from typing import Any, Optional

import requests

from ..config import config

logger = logging.getLogger(__name__)

def extract_chat_id(update: Any) -> Optional[Any]:
    """Return message.chat.id from a Telegram update, or None"""
    if not isinstance(update, dict):
        return None
    message = update.get("message")
    if not isinstance(message, dict):
        return None
    chat = message.get("chat")
    if not isinstance(chat, dict):
        return None
    return chat.get("id") or None

class TelegramNotifier:
    """Sends the fixed webhook reply; delivery is fire-and-forget"""
    
    def __init__(self, token: str = None, reply: str = None,
                 session: Optional[requests.Session] = None):
        self.token = token if token is not None else config.TELEGRAM_TOKEN
        self.reply = reply if reply is not None else config.TELEGRAM_REPLY
        self._session = session or requests.Session()
    
    @property
    def send_url(self) -> str:
        return f"https://api.telegram.org/bot{self.token}/sendMessage"
    
    def notify(self, chat_id) -> None:
        """
        Send the reply to a chat.
        
        Delivery failures are logged and never reported to the caller.
        """
        try:
            response = self._session.post(
                self.send_url,
                json={"chat_id": chat_id, "text": self.reply},
                timeout=config.HTTP_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.warning("Telegram reply to chat %s failed: %s", chat_id, e)
            return
        
        if not response.ok:
            logger.warning("Telegram reply to chat %s returned HTTP %s", chat_id, response.status_code)
    
    def handle_update(self, update: Any) -> None:
        chat_id = extract_chat_id(update)
        if chat_id is not None:
            self.notify(chat_id)
