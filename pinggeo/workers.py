"""Worker classes for background probing tasks."""

import logging

from PySide6.QtCore import QObject, QRunnable, Signal

from pinggeo.collector import Prober
from pinggeo.errors import ProbeError
from pinggeo.models import ReferenceNode

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """Signals for reporting a probe outcome from a pool thread."""

    measured = Signal(object, float)  # Emits (ReferenceNode, avg_rtt_ms)
    failed = Signal(object, str)  # Emits (ReferenceNode, reason)
    finished = Signal(object)  # Emits ReferenceNode when the worker completes


class ProbeWorker(QRunnable):
    """Worker that measures one reference node with prober.measure() on a pool thread."""

    def __init__(self, prober: Prober, node: ReferenceNode, count: int, timeout_s: float):
        super().__init__()
        self.prober = prober
        self.node = node
        self.count = count
        self.timeout_s = timeout_s
        self.signals = WorkerSignals()

    def run(self):
        """Execute the probe; failures are reported, never raised."""
        try:
            logger.debug("Worker starting: node=%s, address=%s", self.node.name, self.node.address)

            avg_rtt_ms = self.prober.measure(self.node.address, self.count, self.timeout_s)

            self.signals.measured.emit(self.node, float(avg_rtt_ms))

            logger.debug("Worker completed: node=%s, avg=%.2fms", self.node.name, avg_rtt_ms)

        except ProbeError as e:
            logger.debug("Probe failed: node=%s, reason=%s", self.node.name, e.reason)
            self.signals.failed.emit(self.node, e.reason)

        except Exception as e:
            # Unexpected transport errors count as a failed probe
            logger.exception("Worker exception: node=%s, error=%s", self.node.name, str(e))
            self.signals.failed.emit(self.node, str(e))

        finally:
            self.signals.finished.emit(self.node)
