"""Daily health tip service."""

import logging
from dataclasses import dataclass, field

from medimate.services.parser import TextModelClient
from medimate.services.schedule import today_string

_logger = logging.getLogger(__name__)

TIP_PROMPT = (
    "Give me one short, encouraging health tip specifically about medication "
    "adherence or general wellness in Thai. Keep it under 2 sentences."
)
EMPTY_TIP_FALLBACK = "ดูแลสุขภาพด้วยนะครับ"
ERROR_TIP_FALLBACK = "อย่าลืมทานยาให้ตรงเวลานะครับ"


@dataclass
class TipService:
    """Service that fetches a short tip, falling back to a static one.

    A successful tip is remembered until the UTC date changes.
    """

    client: TextModelClient | None
    model: str
    store: bool = False
    _tip_day: str | None = field(default=None, init=False, repr=False)
    _tip: str | None = field(default=None, init=False, repr=False)

    async def get_tip(self, today: str | None = None) -> str | None:
        """Return today's tip, or None when AI features are disabled."""
        if self.client is None:
            return None
        day = today or today_string()
        if self._tip_day == day and self._tip is not None:
            return self._tip
        try:
            text = await self.client.complete(
                model=self.model, store=self.store, prompt=TIP_PROMPT
            )
        except Exception as exc:
            _logger.warning("Tip request failed: %s", exc)
            return ERROR_TIP_FALLBACK
        tip = text.strip()
        if not tip:
            return EMPTY_TIP_FALLBACK
        self._tip_day, self._tip = day, tip
        return tip
