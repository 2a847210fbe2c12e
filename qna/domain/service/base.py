"""Domain service marker base."""


class Service:
    """Stateless rules over repositories.

    Vote toggling, acceptance transitions and ranking live in subclasses;
    each is constructed per request with the repositories it needs.
    """
