"""Provider base shared by every DI component."""

from typing import ClassVar, Literal, Optional

from dishka import Provider

# Components that tests can swap for an in-memory implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """DI provider carrying mock-selection metadata.

    A mockable component declares ``__mock_component__`` on an abstract
    base provider; its production and mock implementations subclass that
    base and set ``__is_mock__``. Concrete providers leave both unset.
    """

    __mock_component__: ClassVar[Optional[Component]] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def mockable_component(cls) -> Optional[Component]:
        """Component name if this base has swappable implementations."""
        if cls.__mock_component__ and cls.__subclasses__():
            return cls.__mock_component__
        return None
