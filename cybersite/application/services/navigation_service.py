"""Navigation service — the site menu, at most two levels deep."""

from typing import Any, Dict, List, Optional

from cybersite.core.exceptions import BadRequestException, ConflictException, EntityNotFoundException
from cybersite.domain.models.navigation_item import NavigationItem
from cybersite.domain.repositories.navigation_repository import NavigationRepository
from cybersite.domain.schemas.navigation import NavigationItemCreate, NavigationItemUpdate


def list_visible_items(repo: NavigationRepository) -> List[NavigationItem]:
    return repo.list_ordered(visible_only=True)


def list_items(repo: NavigationRepository) -> List[NavigationItem]:
    return repo.list_ordered()


def build_tree(items: List[NavigationItem]) -> List[Dict[str, Any]]:
    """Nest an ordered flat list into top-level entries with their children.

    Children whose parent is absent from `items` (e.g. a hidden parent) are dropped.
    """
    nodes = {item.id: {"item": item, "children": []} for item in items}
    tree = []
    for item in items:
        if item.parent_id is None:
            tree.append(nodes[item.id])
        elif item.parent_id in nodes:
            nodes[item.parent_id]["children"].append(nodes[item.id])
    return tree


def get_item(repo: NavigationRepository, item_id: int) -> NavigationItem:
    item = repo.get_by_id(item_id)
    if item is None:
        raise EntityNotFoundException("Navigation item not found")
    return item


def _check_parent(repo: NavigationRepository, parent_id: Optional[int], item_id: Optional[int] = None) -> None:
    if parent_id is None:
        return
    if item_id is not None and parent_id == item_id:
        raise BadRequestException("A navigation item cannot be its own parent")

    parent = repo.get_by_id(parent_id)
    if parent is None:
        raise BadRequestException("Parent navigation item not found", {"parentId": parent_id})
    if parent.parent_id is not None:
        raise BadRequestException("Navigation supports only two levels; the parent is already a child")
    if item_id is not None and repo.list_children(item_id):
        raise BadRequestException("An item with children cannot become a child")


def create_item(repo: NavigationRepository, data: NavigationItemCreate) -> NavigationItem:
    _check_parent(repo, data.parent_id)
    return repo.create(data.model_dump())


def update_item(repo: NavigationRepository, item_id: int, data: NavigationItemUpdate) -> NavigationItem:
    item = get_item(repo, item_id)
    changes = data.model_dump(exclude_unset=True)

    path = changes.get("path", item.path)
    external_url = changes.get("external_url", item.external_url)
    if path and external_url:
        raise BadRequestException("Set either path or externalUrl, not both")

    if "parent_id" in changes and changes["parent_id"] != item.parent_id:
        _check_parent(repo, changes["parent_id"], item_id)

    return repo.update(item, changes)


def delete_item(repo: NavigationRepository, item_id: int) -> NavigationItem:
    item = get_item(repo, item_id)
    if repo.list_children(item_id):
        raise ConflictException("Delete or move the child items first")
    repo.delete(item_id)
    return item
