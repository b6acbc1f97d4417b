"""Seed development data: a short conversation between two students."""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta, timezone

from mitrai_chat.application.dto.message import SendMessageDTO
from mitrai_chat.application.ports.clock import FixedClock
from mitrai_chat.domain.value_objects.ids import chat_id_of
from mitrai_chat.infrastructure.db.session import AsyncSessionLocal
from mitrai_chat.infrastructure.db.uow import SqlAlchemyUoW
from mitrai_chat.services import chat_service

logger = logging.getLogger(__name__)

ASHA = ("u_asha", "Asha")
RAVI = ("u_ravi", "Ravi")


async def seed() -> None:
    clock = FixedClock(datetime.now(timezone.utc) - timedelta(minutes=10))
    conversation = [
        (ASHA, RAVI, "Hey! Are you also preparing for the DSA midterm?"),
        (RAVI, ASHA, "Yes, graphs are killing me. Want to pair up tonight?"),
        (ASHA, RAVI, "Sure, 8pm works. I'll share my notes on Dijkstra."),
    ]
    async with AsyncSessionLocal() as session:
        uow = SqlAlchemyUoW(session)
        for (sender_id, sender_name), (receiver_id, receiver_name), text in conversation:
            await chat_service.send_message(
                SendMessageDTO(
                    sender_id=sender_id,
                    receiver_id=receiver_id,
                    text=text,
                    sender_name=sender_name,
                    receiver_name=receiver_name,
                ),
                uow,
                clock=clock,
            )
            clock.advance(minutes=1)

    logger.info(
        "Seeded chat %s with %d messages",
        chat_id_of(ASHA[0], RAVI[0]),
        len(conversation),
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())


if __name__ == "__main__":
    main()
