"""
Adapter between the export pipeline and an archive provider.
"""

from ..errors import LoadError


class ObjectLoader:
    """Loads the object group stored at an identifier."""

    def __init__(self, provider, logger):
        self.provider = provider
        self.logger = logger

    def load(self, identifier):
        """
        Ask the provider for every object at identifier.

        Returns:
            list: Loaded objects, possibly empty

        Raises:
            LoadError: If the provider fails for any reason
        """
        try:
            objects = self.provider.load_all_objects(identifier)
        except LoadError:
            raise
        except Exception as e:
            raise LoadError(f"Failed to load {identifier}: {e}", identifier=identifier) from e

        group = list(objects)
        self.logger.debug(f"Loaded {len(group)} objects from {identifier}")
        return group
