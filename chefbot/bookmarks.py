"""
Bookmark store for saved recipes.

The user's saved recipes (the bookmark set) are kept as one serialized blob
under a single key of a KeyValueStore. The set is ordered by insertion and
unique by recipe id.

Every mutation is a full read-modify-write cycle:
read blob -> deserialize -> mutate in memory -> serialize -> write the whole blob.

Behavior:
- list_all() never fails: missing, unreadable or corrupt storage reads as an empty set
- upsert() is insert-if-absent; an existing id is left untouched (first write wins)
- remove() drops every entry with the id; removing an absent id is a no-op
- Write failures come back as BookmarkUpdate.error instead of being raised
- Mutations hold the backing store's mutation_lock, so concurrent in-process
  mutations cannot lose an update, even through separate BookmarkStore
  instances on the same file

# NOTE: The lock is in-process only. Two processes writing the same file can
    still lose an update.

Serialized format:
    {"version": 1, "recipes": [<Recipe.to_api() dict>, ...]}

A bare JSON array of recipe dicts (format version 0) is accepted on read and
rewritten as version 1 on the next mutation.
"""

import json
import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from chefbot.config import StorageConfig
from chefbot.errors import StorageReadError, StorageWriteError, UnsupportedFormatError
from chefbot.models import Recipe
from chefbot.storage import KeyValueStore

logger = logging.getLogger(__name__)

BOOKMARK_FORMAT_VERSION = 1


class BookmarkUpdate(BaseModel):
    """
    Result of a bookmark mutation.

    Attributes:
        bookmarks: The bookmark set after the mutation (or as read, if nothing was written)
        changed: Whether the set differs from what was stored before
        error: Human-readable message if the new set could not be persisted
    """
    bookmarks: List[Recipe] = Field(default_factory=list)
    changed: bool = False
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.error is None


def serialize_bookmarks(recipes: List[Recipe]) -> str:
    """Encode a bookmark set as the versioned JSON blob."""
    payload = {
        "version": BOOKMARK_FORMAT_VERSION,
        "recipes": [recipe.to_api() for recipe in recipes],
    }
    return json.dumps(payload, ensure_ascii=False)


def deserialize_bookmarks(blob: str) -> List[Recipe]:
    """
    Decode a bookmark blob.

    Malformed recipe entries are dropped with a warning. If the blob holds the
    same id more than once, the first entry wins.

    Args:
        blob: Serialized bookmark set (version 1 object or legacy bare array)

    Returns:
        List of recipes in stored order

    Raises:
        StorageReadError: If the blob is not valid JSON or has an unknown shape
        UnsupportedFormatError: If the blob declares a newer format version
    """
    try:
        data: Any = json.loads(blob)
    except json.JSONDecodeError as e:
        raise StorageReadError(f"Bookmark data is not valid JSON: {e}") from e

    if isinstance(data, list):
        entries = data
    elif isinstance(data, dict):
        version = data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            raise StorageReadError("Bookmark data has no valid 'version' field")
        if version > BOOKMARK_FORMAT_VERSION:
            raise UnsupportedFormatError(version)
        entries = data.get("recipes")
        if not isinstance(entries, list):
            raise StorageReadError("Bookmark data has no 'recipes' list")
    else:
        raise StorageReadError(f"Bookmark data has unexpected type {type(data).__name__}")

    recipes: List[Recipe] = []
    seen_ids = set()
    for entry in entries:
        if not isinstance(entry, dict):
            logger.warning("Dropping non-object bookmark entry: %r", entry)
            continue
        try:
            recipe = Recipe.from_api(entry)
        except ValidationError:
            logger.warning("Dropping malformed bookmark entry idMeal=%r", entry.get("idMeal"))
            continue
        if recipe.id in seen_ids:
            logger.warning("Dropping duplicate bookmark entry for recipe %s", recipe.id)
            continue
        seen_ids.add(recipe.id)
        recipes.append(recipe)
    return recipes


class BookmarkStore:
    """
    Durable, idempotent management of the bookmark set.

    Args:
        store: Key-value store holding the serialized set
        key: Storage key (optional, reads CHEFBOT_BOOKMARKS_KEY or defaults to "saved_recipes")
    """

    def __init__(self, store: KeyValueStore, key: Optional[str] = None) -> None:
        self.store = store
        self.key = key or StorageConfig.get_bookmarks_key()
        # Reentrant so toggle() can call upsert()/remove() while holding it
        self._lock = store.mutation_lock

    def _read(self) -> List[Recipe]:
        blob = self.store.get(self.key)
        if blob is None:
            return []
        return deserialize_bookmarks(blob)

    def _read_for_update(self) -> List[Recipe]:
        """
        Read the current set before a mutation.

        Corrupt data reads as empty, so the mutation replaces it.

        Raises:
            UnsupportedFormatError: If the stored data is from a newer format version
        """
        try:
            return self._read()
        except UnsupportedFormatError:
            raise
        except StorageReadError as e:
            logger.warning("Bookmark data under %r is unreadable, starting from empty: %s", self.key, e)
            return []

    def _write(self, recipes: List[Recipe]) -> Optional[str]:
        """Persist the full set. Returns an error message on failure, None on success."""
        try:
            self.store.set(self.key, serialize_bookmarks(recipes))
        except StorageWriteError as e:
            logger.error("Failed to persist %d bookmarks under %r: %s", len(recipes), self.key, e)
            return str(e)
        return None

    def list_all(self) -> List[Recipe]:
        """
        Return the full bookmark set, oldest first.

        Never raises for storage problems: missing, unreadable or unsupported
        data is reported as an empty set.
        """
        try:
            return self._read()
        except StorageReadError as e:
            logger.warning("Bookmark data under %r is unreadable, treating as empty: %s", self.key, e)
            return []

    def contains(self, recipe_id: str) -> bool:
        """Check whether a recipe id is bookmarked."""
        return any(recipe.id == recipe_id for recipe in self.list_all())

    def upsert(self, recipe: Recipe) -> BookmarkUpdate:
        """
        Bookmark a recipe if its id is not already saved.

        An existing bookmark with the same id is left exactly as stored, even
        if the given recipe's other fields differ. Nothing is written in that case.

        Args:
            recipe: Recipe to save

        Returns:
            BookmarkUpdate with the resulting set
        """
        with self._lock:
            try:
                current = self._read_for_update()
            except UnsupportedFormatError as e:
                logger.warning("Refusing to overwrite bookmark data under %r: %s", self.key, e)
                return BookmarkUpdate(bookmarks=[], changed=False, error=str(e))

            if any(saved.id == recipe.id for saved in current):
                logger.debug("Recipe %s already bookmarked, leaving it unchanged", recipe.id)
                return BookmarkUpdate(bookmarks=current, changed=False)

            updated = current + [recipe]
            error = self._write(updated)
            if error:
                return BookmarkUpdate(bookmarks=current, changed=False, error=error)

            logger.info("Bookmarked recipe %s (%s); %d saved", recipe.id, recipe.name, len(updated))
            return BookmarkUpdate(bookmarks=updated, changed=True)

    def remove(self, recipe_id: str) -> BookmarkUpdate:
        """
        Remove every bookmark with the given recipe id.

        Removing an id that is not saved is a no-op on the set; the set is still
        written back.

        Args:
            recipe_id: Upstream recipe id

        Returns:
            BookmarkUpdate with the resulting set
        """
        with self._lock:
            try:
                current = self._read_for_update()
            except UnsupportedFormatError as e:
                logger.warning("Refusing to overwrite bookmark data under %r: %s", self.key, e)
                return BookmarkUpdate(bookmarks=[], changed=False, error=str(e))

            updated = [saved for saved in current if saved.id != recipe_id]
            error = self._write(updated)
            if error:
                return BookmarkUpdate(bookmarks=current, changed=False, error=error)

            changed = len(updated) != len(current)
            if changed:
                logger.info("Removed bookmark for recipe %s; %d saved", recipe_id, len(updated))
            return BookmarkUpdate(bookmarks=updated, changed=changed)

    def toggle(self, recipe: Recipe) -> BookmarkUpdate:
        """Remove the recipe if it is bookmarked, otherwise bookmark it."""
        with self._lock:
            if self.contains(recipe.id):
                return self.remove(recipe.id)
            return self.upsert(recipe)
