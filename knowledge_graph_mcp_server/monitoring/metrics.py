import time
from dataclasses import dataclass
from typing import Dict, Any
import logging
from collections import deque

from ..storage.base import StorageBackend

logger = logging.getLogger(__name__)

@dataclass
class OperationMetrics:
    call_count: int = 0
    total_duration: float = 0.0
    failures: int = 0

    @property
    def avg_duration(self) -> float:
        return self.total_duration / self.call_count if self.call_count > 0 else 0.0

    @property
    def failure_rate(self) -> float:
        return self.failures / self.call_count if self.call_count > 0 else 0.0

class MetricsCollector:
    def __init__(self, window_size: int = 3600):  # 1 hour default
        self.window_size = window_size
        self.operation_metrics: Dict[str, OperationMetrics] = {}
        self.operation_times: Dict[str, deque] = {}  # Rolling window of (timestamp, duration)
        self.last_cleanup = time.time()

    def record_operation(self, operation: str, duration: float, failed: bool = False):
        """Record metrics for a single tool invocation."""
        if operation not in self.operation_metrics:
            self.operation_metrics[operation] = OperationMetrics()
            self.operation_times[operation] = deque(maxlen=1000)

        metrics = self.operation_metrics[operation]
        metrics.call_count += 1
        metrics.total_duration += duration
        if failed:
            metrics.failures += 1

        self.operation_times[operation].append((time.time(), duration))

    def get_metrics(self) -> Dict[str, Any]:
        """Get current metrics."""
        self._cleanup_old_metrics()

        return {
            'operations': {
                op: {
                    'count': metrics.call_count,
                    'failures': metrics.failures,
                    'avg_duration': metrics.avg_duration,
                    'failure_rate': metrics.failure_rate,
                    'p95_duration': self._calculate_percentile(op, 95),
                    'p99_duration': self._calculate_percentile(op, 99)
                }
                for op, metrics in self.operation_metrics.items()
            }
        }

    def _calculate_percentile(self, operation: str, percentile: float) -> float:
        """Calculate duration percentile for an operation."""
        if operation not in self.operation_times:
            return 0.0

        times = sorted(t[1] for t in self.operation_times[operation])
        if not times:
            return 0.0

        idx = min(int(len(times) * (percentile / 100)), len(times) - 1)
        return times[idx]

    def _cleanup_old_metrics(self, force: bool = False):
        """Remove samples outside the window."""
        current_time = time.time()
        if not force and current_time - self.last_cleanup < 60:  # Only cleanup every minute
            return

        cutoff = current_time - self.window_size
        for operation in self.operation_times:
            while (self.operation_times[operation] and
                   self.operation_times[operation][0][0] < cutoff):
                self.operation_times[operation].popleft()

        self.last_cleanup = current_time

class HealthCheck:
    def __init__(self, storage: StorageBackend):
        self.storage = storage

    async def check_store(self) -> Dict[str, Any]:
        """Perform store health check."""
        try:
            start_time = time.time()
            stats = await self.storage.get_statistics()
            response_time = time.time() - start_time

            return {
                'status': 'healthy',
                'response_time': response_time,
                'entity_count': stats['entity_count'],
                'relation_count': stats['relation_count']
            }
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return {
                'status': 'unhealthy',
                'error': str(e)
            }
