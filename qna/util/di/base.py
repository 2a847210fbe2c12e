"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and a mock provider
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in ``PROVIDERS``.

    Attributes:
        __mock_component__: Name of the swappable component, None if concrete
        __is_mock__: True on the test variant of a swappable component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
