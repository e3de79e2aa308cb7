from dataclasses import field
from typing import List

from pydantic.dataclasses import dataclass


@dataclass
class QueueDemoResult:
    queue_url: str
    message_id: str
    received_bodies: List[str] = field(default_factory=list)
