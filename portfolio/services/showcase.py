"""
Showcase service - CRUD for showcase items with localized slugs.

Each locale has its own slug namespace. A slug must be unique among all
items' slugs *in that locale only*: the same text may be the Dutch slug
of one item and the English slug of another, or both slugs of a single
item.

The underlying storage is a flat key-value namespace with no secondary
indexes, so every slug query scans all records. Writes are serialized
behind a single lock so the availability check and the write it guards
cannot interleave with another writer.
"""

from __future__ import annotations

import asyncio
import logging

from portfolio.core.errors import ConflictError, NotFoundError, ValidationError
from portfolio.core.locales import DEFAULT_LOCALE, Locale
from portfolio.core.models import (
    LocalizedContent,
    ShowcaseDraft,
    ShowcaseItem,
    ShowcasePatch,
    mirror_default_fields,
)
from portfolio.core.slug import generate_slug, is_valid_slug
from portfolio.core.utils import generate_id, utc_now
from portfolio.storage.base import ItemStorage

logger = logging.getLogger(__name__)


def _namespace_label(locale: Locale | None) -> str:
    return locale.language_name if locale else "default"


def _slug_owner(
    items: list[ShowcaseItem],
    slug: str,
    locale: Locale | None,
) -> ShowcaseItem | None:
    """
    Find the item holding a slug in one namespace.

    ``locale=None`` is the legacy default-slug namespace.
    """
    for item in items:
        held = item.slug_for(locale) if locale else item.default_slug
        if held == slug:
            return item
    return None


class ShowcaseStore:
    """
    Localized content store for showcase items.

    Usage:
        store = ShowcaseStore(InMemoryItemStorage())

        item = await store.create(ShowcaseDraft(
            title_nl="Stem AI", title_en="Voice AI",
            description_nl="...", description_en="...",
        ))
        item.slug_for(Locale.EN)  # -> "voice-ai"

        # Resolve an incoming URL segment
        found = await store.resolve_by_slug("voice-ai", Locale.EN)
    """

    def __init__(self, storage: ItemStorage):
        self.storage = storage
        self._write_lock = asyncio.Lock()

    # =========================================================================
    # Queries
    # =========================================================================

    async def _load_all(self) -> list[ShowcaseItem]:
        return [ShowcaseItem.model_validate(record) for record in await self.storage.get_all()]

    async def is_slug_available(
        self,
        slug: str,
        locale: Locale | None,
        exclude_id: str | None = None,
    ) -> bool:
        """
        Check whether a slug is free in a locale's namespace.

        Returns False iff an item other than ``exclude_id`` already holds
        ``slug`` in that locale. ``locale=None`` checks the legacy
        default-slug namespace.
        """
        locale = Locale(locale) if locale is not None else None
        owner = _slug_owner(await self._load_all(), slug, locale)
        return owner is None or owner.id == exclude_id

    async def get(self, item_id: str, include_private: bool = False) -> ShowcaseItem:
        """
        Get an item by ID.

        Private items are reported as not found unless ``include_private``
        is set, so their existence is not revealed.
        """
        record = await self.storage.get(item_id)
        if record is None:
            raise NotFoundError()

        item = ShowcaseItem.model_validate(record)
        if not item.is_public and not include_private:
            raise NotFoundError()
        return item

    async def list(self, include_private: bool = False) -> list[ShowcaseItem]:
        """List items, newest first. Private items are omitted unless requested."""
        items = [
            item for item in await self._load_all()
            if include_private or item.is_public
        ]
        items.sort(key=lambda item: item.created_at, reverse=True)
        return items

    async def resolve_by_slug(
        self,
        slug: str,
        locale: Locale | None = None,
        include_private: bool = False,
    ) -> ShowcaseItem | None:
        """
        Resolve an incoming slug to an item.

        Lookup order:
        1. the requested locale's slug namespace (if a locale is given)
        2. the legacy default-slug field
        3. the other locale's namespace (every locale when none is given)

        Records predating the bilingual model only have a default slug, and
        a shared URL may carry the slug of the other locale.
        """
        if not slug:
            return None

        locale = Locale(locale) if locale is not None else None
        items = [
            item for item in await self._load_all()
            if include_private or item.is_public
        ]

        if locale:
            match = _slug_owner(items, slug, locale)
            if match:
                return match

        match = _slug_owner(items, slug, None)
        if match:
            return match

        fallbacks = (locale.other,) if locale else tuple(Locale)
        for other in fallbacks:
            match = _slug_owner(items, slug, other)
            if match:
                return match

        return None

    # =========================================================================
    # Validation
    # =========================================================================

    @staticmethod
    def _check_slug_format(slug: str, locale: Locale | None) -> None:
        if not is_valid_slug(slug):
            raise ValidationError(
                f"Invalid {_namespace_label(locale)} slug format. "
                "Use only lowercase letters, numbers, and hyphens.",
                field="slug",
                locale=locale,
            )

    @staticmethod
    def _check_slug_available(
        items: list[ShowcaseItem],
        slug: str,
        locale: Locale | None,
        exclude_id: str | None = None,
    ) -> None:
        owner = _slug_owner(items, slug, locale)
        if owner is not None and owner.id != exclude_id:
            raise ConflictError(
                f"The {_namespace_label(locale)} slug is already taken",
                slug=slug,
                locale=locale,
            )

    # =========================================================================
    # Mutations
    # =========================================================================

    async def create(self, draft: ShowcaseDraft, created_by: str = "") -> ShowcaseItem:
        """
        Create an item.

        Both locales need a title and description. Missing slugs are
        derived from the locale's title. The default slug, supplied or
        mirrored from Dutch, must be unique among default slugs. All checks
        run before anything is written.

        Raises:
            ValidationError: Missing field or malformed slug
            ConflictError: Slug already taken in its locale
        """
        for locale in Locale:
            content = draft.content_for(locale)
            if not content.title.strip():
                raise ValidationError(
                    f"Title is required in {locale.language_name}",
                    field="title",
                    locale=locale,
                )
            if not content.description.strip():
                raise ValidationError(
                    f"Description is required in {locale.language_name}",
                    field="description",
                    locale=locale,
                )

        slugs = {
            locale: draft.content_for(locale).slug or generate_slug(draft.content_for(locale).title)
            for locale in Locale
        }
        for locale, slug in slugs.items():
            self._check_slug_format(slug, locale)
        defaults = mirror_default_fields(draft, slugs)
        self._check_slug_format(defaults["default_slug"], None)

        async with self._write_lock:
            items = await self._load_all()
            for locale, slug in slugs.items():
                self._check_slug_available(items, slug, locale)
            self._check_slug_available(items, defaults["default_slug"], None)

            now = utc_now()
            item = ShowcaseItem(
                id=generate_id(),
                **defaults,
                localized={
                    locale: LocalizedContent(
                        title=draft.content_for(locale).title,
                        slug=slugs[locale],
                        description=draft.content_for(locale).description,
                    )
                    for locale in Locale
                },
                image_url=draft.image_url,
                app_url=draft.app_url,
                categories=draft.categories,
                keywords=draft.keywords,
                is_public=draft.is_public,
                created_by=created_by,
                created_at=now,
                updated_at=now,
            )
            await self.storage.put(item.id, item.to_record())

        logger.info(
            "Created showcase item %s (nl=%s, en=%s)",
            item.id, slugs[Locale.NL], slugs[Locale.EN],
        )
        return item

    async def update(self, item_id: str, patch: ShowcasePatch) -> ShowcaseItem:
        """
        Apply a partial update.

        Each locale slug present in the patch is re-validated, ignoring the
        item itself in the conflict scan. Locales and fields absent from
        the patch are left untouched. A default slug that mirrors the Dutch
        slug is renamed along with it.

        Raises:
            NotFoundError: No item with this ID
            ValidationError: Malformed slug
            ConflictError: Slug already taken in its locale
        """
        async with self._write_lock:
            record = await self.storage.get(item_id)
            if record is None:
                raise NotFoundError()
            item = ShowcaseItem.model_validate(record)

            slug_updates = patch.slug_updates()
            for locale, slug in slug_updates.items():
                self._check_slug_format(slug, locale)

            # A default slug mirroring the Dutch one follows it on rename
            default_slug = patch.default_slug
            if (
                default_slug is None
                and DEFAULT_LOCALE in slug_updates
                and item.default_slug == item.slug_for(DEFAULT_LOCALE)
            ):
                default_slug = slug_updates[DEFAULT_LOCALE]
            if default_slug is not None:
                self._check_slug_format(default_slug, None)

            if slug_updates or default_slug is not None:
                items = await self._load_all()
                for locale, slug in slug_updates.items():
                    self._check_slug_available(items, slug, locale, exclude_id=item_id)
                if default_slug is not None:
                    self._check_slug_available(items, default_slug, None, exclude_id=item_id)

            updated = self._merge(item, patch, default_slug)
            await self.storage.put(item_id, updated.to_record())

        logger.info("Updated showcase item %s", item_id)
        return updated

    @staticmethod
    def _merge(
        item: ShowcaseItem,
        patch: ShowcasePatch,
        default_slug: str | None = None,
    ) -> ShowcaseItem:
        localized = dict(item.localized)
        for locale, changes in patch.localized.items():
            current = localized.get(locale) or LocalizedContent()
            localized[locale] = current.model_copy(update=changes.model_dump(exclude_none=True))

        updates = {
            **patch.scalar_updates(),
            "localized": localized,
            "updated_at": utc_now(),
        }
        if default_slug is not None:
            updates["default_slug"] = default_slug
        return item.model_copy(update=updates)

    async def delete(self, item_id: str) -> None:
        """
        Delete an item permanently.

        Raises:
            NotFoundError: No item with this ID (including a repeated delete)
        """
        async with self._write_lock:
            if not await self.storage.delete(item_id):
                raise NotFoundError()

        logger.info("Deleted showcase item %s", item_id)
