"""Custom exceptions for in-memory cache operations."""


class InvalidConfigurationError(Exception):
    """Raised when a cache is constructed with invalid arguments."""


class InvalidCapacityError(InvalidConfigurationError):
    """Raised when an invalid capacity is provided."""

    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"Invalid capacity: {capacity!r}. Must be a positive integer greater than 0")


class InvalidEvictionPolicyError(InvalidConfigurationError):
    """Raised when an invalid eviction policy is provided."""

    def __init__(self, policy):
        self.policy = policy
        super().__init__(f"Invalid eviction policy: {policy!r}. Supported policies: LRU, FIFO, LFU")


class PolicyAlreadyAttachedError(InvalidConfigurationError):
    """Raised when one policy instance is handed to a second cache."""

    def __init__(self, policy):
        self.policy = policy
        super().__init__(f"Eviction policy {type(policy).__name__} is already attached to another cache")


class InvalidTTLError(InvalidConfigurationError):
    """Raised when a negative or non-numeric ttl is provided."""

    def __init__(self, ttl):
        self.ttl = ttl
        super().__init__(f"Invalid ttl: {ttl!r}. Must be a non-negative duration")
