"""Target and reference-node probing with bounded concurrency."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from PySide6.QtCore import QMutex, QMutexLocker, QObject, Qt, QThread, QThreadPool, Signal

from pinggeo.collector import Prober
from pinggeo.config import Settings
from pinggeo.distance_model import rtt_to_distance
from pinggeo.errors import NoUsableDataError, ProbeError, TargetUnreachableError
from pinggeo.models import Coherence, Location, Measurement, RankedSet, ReferenceNode, Stats
from pinggeo.multilateration import multilaterate
from pinggeo.ranking import assess_coherence, rank, summarize
from pinggeo.trilateration import trilaterate_ranked
from pinggeo.workers import ProbeWorker

logger = logging.getLogger(__name__)


@dataclass
class ProbeRun:
    """Outcome of probing a target and a reference catalog."""

    target: str
    target_rtt_ms: float
    ranked: RankedSet
    attempted: int
    failed: int


@dataclass
class GeolocationReport:
    """Everything a report sink needs to present one run."""

    target: str
    target_rtt_ms: float
    ranked: RankedSet
    trilateration: Location
    multilateration: Location
    multilateration_count: int
    stats: Stats | None
    coherence: Coherence
    attempted: int = 0
    failed: int = 0
    notes: list[str] = field(default_factory=list)


class ProbeOrchestrator(QObject):
    """Probes a target, then fans out to every reference node on a thread pool.

    Key features:
    - Target probed first, synchronously; failure aborts the run
    - One ProbeWorker per reference node, pool bounded by max_concurrent
    - Best-effort pacing between launches (launch_interval_ms)
    - Failed nodes are logged and dropped, never retried
    - Results appended under a mutex from pool threads

    ``progress`` is emitted from pool threads. Without a running Qt event
    loop, observers must connect with ``Qt.DirectConnection``.
    """

    # Signals
    progress = Signal(int, int, str, bool)  # (done, total, node name, ok)

    def __init__(self, prober: Prober, settings: Settings | None = None, parent=None):
        """Initialize the orchestrator.

        Args:
            prober: Probe transport used for the target and every node
            settings: Sample counts, timeout and pool parameters
            parent: Qt parent object
        """
        super().__init__(parent)

        self.prober = prober
        self.settings = settings if settings is not None else Settings()

        # Threading
        self.thread_pool = QThreadPool(self)
        self.thread_pool.setMaxThreadCount(self.settings.max_concurrent)

        # Shared run state, guarded by _mutex
        self._mutex = QMutex()
        self._results: list[tuple[int, Measurement]] = []
        self._target_rtt_ms = 0.0
        self._total = 0
        self._done = 0
        self._failed = 0
        self._in_flight = 0
        self._workers: list[ProbeWorker] = []

    def probe_target(self, address: str) -> float:
        """Measure the target's average RTT in ms.

        Raises:
            TargetUnreachableError: if the probe fails
        """
        logger.info(
            "Probing target: address=%s, samples=%d",
            address,
            self.settings.target_samples,
        )
        try:
            rtt = self.prober.measure(address, self.settings.target_samples, self.settings.timeout_s)
        except ProbeError as e:
            logger.error("Target unreachable: address=%s, reason=%s", address, e.reason)
            raise TargetUnreachableError(address, e) from e

        logger.info("Target RTT: address=%s, avg=%.2fms", address, rtt)
        return float(rtt)

    def collect(self, target_rtt_ms: float, catalog: Sequence[ReferenceNode]) -> list[Measurement]:
        """Probe every catalog node and return the successful measurements.

        Blocks until all workers finish. The returned list is in catalog
        order, not completion order, and is not yet ranked.
        """
        with QMutexLocker(self._mutex):
            self._results = []
            self._target_rtt_ms = target_rtt_ms
            self._total = len(catalog)
            self._done = 0
            self._failed = 0
            self._in_flight = 0
        self._workers = []

        logger.info(
            "Probing %d reference nodes (max_concurrent=%d)",
            len(catalog),
            self.settings.max_concurrent,
        )

        for index, node in enumerate(catalog):
            self._schedule_probe(index, node)
            self._pace()

        self.thread_pool.waitForDone()
        self._workers = []

        with QMutexLocker(self._mutex):
            results = sorted(self._results, key=lambda item: item[0])
            failed = self._failed

        logger.info("Probing finished: %d succeeded, %d failed", len(results), failed)
        return [measurement for _, measurement in results]

    def run(self, target: str, catalog: Sequence[ReferenceNode]) -> ProbeRun:
        """Probe the target and the catalog and rank the results.

        Raises:
            TargetUnreachableError: if the target does not answer
            NoUsableDataError: if the catalog is empty or no node answered
        """
        target_rtt_ms = self.probe_target(target)
        measurements = self.collect(target_rtt_ms, catalog)

        if not measurements:
            raise NoUsableDataError(len(catalog))

        return ProbeRun(
            target=target,
            target_rtt_ms=target_rtt_ms,
            ranked=rank(measurements),
            attempted=len(catalog),
            failed=self._failed,
        )

    def _schedule_probe(self, index: int, node: ReferenceNode):
        """Submit a worker for one catalog node.

        Args:
            index: Catalog position, used to restore catalog order
            node: Node to probe
        """
        worker = ProbeWorker(
            self.prober,
            node,
            self.settings.node_samples,
            self.settings.timeout_s,
        )
        worker.setAutoDelete(False)

        # Slots run on the pool thread; shared state is mutex-guarded
        direct = Qt.ConnectionType.DirectConnection
        worker.signals.measured.connect(
            lambda probed, rtt, i=index: self._on_measured(i, probed, rtt), direct
        )
        worker.signals.failed.connect(self._on_failed, direct)
        worker.signals.finished.connect(self._on_finished, direct)

        with QMutexLocker(self._mutex):
            self._in_flight += 1
        self._workers.append(worker)
        self.thread_pool.start(worker)

    def _pace(self):
        """Pause between launches to spread out the first burst of probes.

        The pool size is what bounds concurrency; this is pacing only.
        """
        interval = self.settings.launch_interval_ms
        if interval > 0:
            QThread.msleep(interval)

    def _on_measured(self, index: int, node: ReferenceNode, avg_rtt_ms: float):
        """Record a successful probe.

        Args:
            index: Catalog position of the node
            node: Catalog node (without RTT)
            avg_rtt_ms: Measured average RTT
        """
        delta_ms = abs(avg_rtt_ms - self._target_rtt_ms)
        measurement = Measurement(
            node=node.with_rtt(avg_rtt_ms),
            delta_ms=delta_ms,
            distance_km=rtt_to_distance(delta_ms),
        )

        with QMutexLocker(self._mutex):
            self._results.append((index, measurement))
            self._done += 1
            done, total = self._done, self._total
            self.progress.emit(done, total, node.name, True)

        logger.debug(
            "[%d/%d] %s: avg=%.2fms, delta=%.2fms", done, total, node.name, avg_rtt_ms, delta_ms
        )

    def _on_failed(self, node: ReferenceNode, reason: str):
        """Count a failed probe; the node is left out of the results.

        Args:
            node: Node whose probe failed
            reason: Failure description
        """
        with QMutexLocker(self._mutex):
            self._failed += 1
            self._done += 1
            done, total = self._done, self._total
            self.progress.emit(done, total, node.name, False)

        logger.info("[%d/%d] %s (%s) failed: %s", done, total, node.name, node.address, reason)

    def _on_finished(self, node: ReferenceNode):
        """Handle worker completion.

        Args:
            node: Node the worker probed
        """
        with QMutexLocker(self._mutex):
            self._in_flight = max(0, self._in_flight - 1)
            in_flight = self._in_flight

        logger.debug("Worker finished: node=%s (in-flight: %d)", node.name, in_flight)

    def get_stats(self):
        """Get orchestrator statistics.

        Returns:
            Dict with run state info
        """
        with QMutexLocker(self._mutex):
            return {
                "total": self._total,
                "done": self._done,
                "failed": self._failed,
                "in_flight": self._in_flight,
                "max_concurrent": self.settings.max_concurrent,
            }


def locate(
    target: str,
    catalog: Sequence[ReferenceNode],
    prober: Prober,
    settings: Settings | None = None,
    observer: Callable[[int, int, str, bool], None] | None = None,
) -> GeolocationReport:
    """Run a full geolocation: probe, rank, estimate and summarize.

    Args:
        target: Address or hostname to locate
        catalog: Reference nodes with known coordinates
        prober: Probe transport
        settings: Run parameters (defaults apply when omitted)
        observer: Optional progress callback (done, total, node name, ok),
            called from pool threads

    Raises:
        TargetUnreachableError: if the target does not answer
        NoUsableDataError: if no reference node answered
    """
    if settings is None:
        settings = Settings()

    orchestrator = ProbeOrchestrator(prober, settings)
    if observer is not None:
        orchestrator.progress.connect(observer, Qt.ConnectionType.DirectConnection)

    run = orchestrator.run(target, catalog)
    ranked = run.ranked

    report = GeolocationReport(
        target=target,
        target_rtt_ms=run.target_rtt_ms,
        ranked=ranked,
        trilateration=trilaterate_ranked(ranked),
        multilateration=multilaterate(ranked, settings.multilateration_count),
        multilateration_count=min(settings.multilateration_count, len(ranked)),
        stats=summarize(ranked),
        coherence=assess_coherence(ranked),
        attempted=run.attempted,
        failed=run.failed,
    )
    if len(ranked) < 3:
        report.notes.append(
            f"only {len(ranked)} reference nodes answered; at least 3 are needed for a position"
        )
        logger.warning("Insufficient data for a position estimate: %d measurements", len(ranked))

    return report
