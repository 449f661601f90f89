from prometheus_client import Counter, Gauge, Histogram


class InventoryMetrics:
    """
    Inventory Service Metrics Collector

    Tracks inventory mutations (block, unblock, capacity changes) and
    how long a full reconciliation of an event takes.
    """

    def __init__(self):
        # ========== Mutation Metrics ==========
        self.inventory_operations = Counter(
            'inventory_operations_total',
            'Inventory mutations by outcome',
            ['operation', 'result'],  # result: success/not_found/validation/type_mismatch/infrastructure
        )

        self.inventory_operation_duration = Histogram(
            'inventory_operation_duration_seconds',
            'Inventory mutation duration',
            ['operation'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
        )

        self.tickets_blocked = Counter(
            'inventory_tickets_blocked_total',
            'Tickets or seats moved into an active block',
            ['inventory_type'],  # ga/reserved
        )

        self.tickets_released = Counter(
            'inventory_tickets_released_total',
            'Tickets or seats released from a block',
            ['inventory_type'],
        )

        # ========== Reconciliation Metrics ==========
        self.summary_build_duration = Histogram(
            'inventory_summary_build_seconds',
            'Time to reconcile an event inventory summary',
            ['inventory_type'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
        )

        self.event_lock_waiters = Gauge(
            'inventory_event_lock_waiters',
            'Mutations waiting on the per-event lock',
        )

    # ========== Helper Methods ==========

    def record_operation(self, *, operation: str, result: str, duration: float):
        self.inventory_operations.labels(operation=operation, result=result).inc()
        self.inventory_operation_duration.labels(operation=operation).observe(duration)

    def record_blocked(self, *, inventory_type: str, quantity: int):
        self.tickets_blocked.labels(inventory_type=inventory_type).inc(quantity)

    def record_released(self, *, inventory_type: str, quantity: int):
        self.tickets_released.labels(inventory_type=inventory_type).inc(quantity)

    def record_summary_build(self, *, inventory_type: str, duration: float):
        self.summary_build_duration.labels(inventory_type=inventory_type).observe(duration)


# Global metrics instance
metrics = InventoryMetrics()
