"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, Memcached, DynamoDB).

Responsibilities:
    - Provide an interface for create-if-absent insertion and retrieval of ShortURLModel objects.
    - Standardize error handling across multiple data store implementations.
    - Enforce a consistent API for use by the link service.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from linkshortener.models import ShortURLModel
        >>> from linkshortener.dao.redis import ShortURLRedisDAO

        >>> dao = ShortURLRedisDAO(...)

        >>> short_url = ShortURLModel(
        ...     target="https://example.com/blog/article-123",
        ...     shortcode="a1b2c",
        ... )
        >>> dao.insert(short_url, ttl=300)

        >>> retrieved = dao.get("a1b2c")
        >>> print(retrieved.target)
        https://example.com/blog/article-123

        >>> print(retrieved.expires_at)
        2025-10-15 00:05:00+00:00
"""

from abc import ABC, abstractmethod

from linkshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, ttl: int | None, **kwargs) -> ShortURLBaseDAO:
            Atomically insert a new ShortURLModel into the data store, only if
            its shortcode is not taken yet.
            Raises ShortURLAlreadyExistsError if the shortcode already exists.
            Raises DataStoreError on connection or write failure.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a ShortURLModel from the data store by shortcode.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

        healthcheck(raise_error: bool = True) -> bool:
            Check connectivity with the data store.

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLRedisDAO) must
        extend this class and implement all abstract methods.

    NOTE:
        - Mappings are expected to expire automatically. The DAO does not
          provide an interface to update or manually delete entries.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, ttl: int | None = None, **kwargs) -> 'ShortURLBaseDAO':
        """Insert a new ShortURLModel into the data store, if absent.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            ttl (int | None):
                Seconds after which the data store evicts the mapping.
                None means the mapping never expires.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a ShortURLModel with the same shortcode already exists.
                The existing mapping is left untouched.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its shortcode.

        Args:
            shortcode (str):
                The shortcode of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given shortcode exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def healthcheck(self, raise_error: bool = True) -> bool:
        """Check connectivity with the data store.

        Args:
            raise_error (bool):
                If True, raises DataStoreError on failure. Defaults to True.

        Returns:
            bool: True if the data store is reachable, False otherwise.

        Raises:
            DataStoreError:
                If the data store is unreachable and raise_error=True.
        """
        pass
