"""Task that drives the heart rate sensor from queued messages."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any

from pinesim.msgqueue import MessageQueue

QUEUE_LENGTH = 10


class Message(IntEnum):
    """Messages understood by the heart rate task."""

    GO_TO_SLEEP = 0
    WAKE_UP = 1
    START_MEASUREMENT = 2
    STOP_MEASUREMENT = 3


class HeartRateState(Enum):
    """Whether the task is running or idle."""

    IDLE = "idle"
    RUNNING = "running"


class HeartRateTask:
    """Receives control messages and switches the sensor on and off.

    controller is any object with a set_heart_rate_task(task) method.
    """

    def __init__(self, heart_rate_sensor, controller):
        self.heart_rate_sensor = heart_rate_sensor
        self.controller: Any = controller
        self.message_queue = MessageQueue(QUEUE_LENGTH, 1)
        self.state = HeartRateState.RUNNING
        self.measurement_started = False

    def start(self):
        """Create a fresh message queue and register with the controller."""
        self.message_queue = MessageQueue(QUEUE_LENGTH, 1)
        self.controller.set_heart_rate_task(self)

    def work(self):
        """Handle every message waiting in the queue, without blocking."""
        while (raw := self.message_queue.receive(0)) is not None:
            self._handle(Message(raw))

    def _handle(self, msg: Message) -> None:
        if msg is Message.GO_TO_SLEEP:
            self.heart_rate_sensor.disable()
            self.state = HeartRateState.IDLE
        elif msg is Message.WAKE_UP:
            self.state = HeartRateState.RUNNING
            if self.measurement_started:
                self.heart_rate_sensor.enable()
        elif msg is Message.START_MEASUREMENT:
            if not self.measurement_started:
                self.heart_rate_sensor.enable()
                self.measurement_started = True
        elif msg is Message.STOP_MEASUREMENT:
            if self.measurement_started:
                self.heart_rate_sensor.disable()
                self.measurement_started = False

    def push_message(self, msg):
        """Queue a message for the task; safe to call from interrupt context."""
        self.message_queue.send_from_isr(int(Message(msg)))