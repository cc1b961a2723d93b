"""
Message Options

Provider-specific options attached to a message.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class MessageOptions:
    """
    Generic options.

    recipient_id overrides the transport's default recipient.
    extra is copied verbatim into the provider request.
    """
    recipient_id: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Fresh dict of the options, safe for the caller to mutate"""
        return dict(self.extra)


@dataclass(frozen=True)
class TelegramOptions(MessageOptions):
    """
    Telegram Bot API sendMessage options.

    Only fields that were set end up in the request body.
    """
    PARSE_MODE_HTML = "HTML"
    PARSE_MODE_MARKDOWN = "Markdown"
    PARSE_MODE_MARKDOWN_V2 = "MarkdownV2"

    chat_id: Optional[str] = None
    parse_mode: Optional[str] = None
    disable_web_page_preview: Optional[bool] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        if self.chat_id is not None and self.recipient_id is None:
            object.__setattr__(self, "recipient_id", str(self.chat_id))

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if self.chat_id is not None:
            data["chat_id"] = str(self.chat_id)
        if self.parse_mode is not None:
            data["parse_mode"] = self.parse_mode
        if self.disable_web_page_preview is not None:
            data["disable_web_page_preview"] = self.disable_web_page_preview
        if self.disable_notification is not None:
            data["disable_notification"] = self.disable_notification
        if self.reply_to_message_id is not None:
            data["reply_to_message_id"] = self.reply_to_message_id
        if self.reply_markup is not None:
            data["reply_markup"] = dict(self.reply_markup)
        return data
