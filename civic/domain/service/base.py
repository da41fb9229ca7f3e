"""Domain service base."""


class Service:
    """Marker base for domain services.

    A service owns one consistency rule across entities, for example
    keeping ``upvote_count`` equal to the sum of stored vote weights, and
    runs each mutation inside ``TransactionManager.atomic()``.
    """
