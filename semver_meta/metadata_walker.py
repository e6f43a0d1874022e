"""Logic for building module metadata from a list of parsed items."""

import logging
from collections.abc import Callable, Iterable

from semver_meta.declarations import (
    ConstMetadata,
    EnumMetadata,
    FunctionMetadata,
    MacroMetadata,
    StructMetadata,
    TraitMetadata,
)
from semver_meta.errors import MalformedDeclarationError
from semver_meta.items import (
    ConstItem,
    EnumItem,
    FnItem,
    Item,
    MacroItem,
    ModItem,
    OtherItem,
    StructItem,
    TraitItem,
    UseItem,
)
from semver_meta.module_metadata import ModuleMetadata
from semver_meta.qualified_ident import SEPARATOR

logger = logging.getLogger(__name__)

SubmoduleVisitor = Callable[[ModItem], ModuleMetadata]


def walk_items(
    name: str,
    items: Iterable[Item],
    *,
    path: str,
    visit_submodule: SubmoduleVisitor | None = None,
) -> ModuleMetadata:
    """Describe the module ``path`` from its items.

    ``visit_submodule`` produces the record of each child module. Without it,
    inline children are walked here and referenced children (whose body lives
    in another file) are recorded empty.
    """
    module = ModuleMetadata(name=name, path=path)

    for item in items:
        if isinstance(item, ConstItem):
            module.consts.append(ConstMetadata.from_item(item))
        elif isinstance(item, EnumItem):
            module.enums.append(EnumMetadata.from_item(item))
        elif isinstance(item, FnItem):
            module.functions.append(FunctionMetadata.from_item(item))
        elif isinstance(item, MacroItem):
            try:
                module.macros.append(MacroMetadata.from_item(item))
            except MalformedDeclarationError as e:
                logger.debug("Skipping macro in %s: %s", path, e)
        elif isinstance(item, ModItem):
            module.submodules.append(_submodule(item, path, visit_submodule))
        elif isinstance(item, StructItem):
            module.structs.append(StructMetadata.from_item(item))
        elif isinstance(item, TraitItem):
            module.traits.append(TraitMetadata.from_item(item))
        elif isinstance(item, (UseItem, OtherItem)):
            continue
        else:
            logger.debug("Ignoring unrecognized item %r in %s", item, path)

    return module


def _submodule(
    item: ModItem, parent_path: str, visit_submodule: SubmoduleVisitor | None
) -> ModuleMetadata:
    if visit_submodule is not None:
        return visit_submodule(item)
    child_path = f"{parent_path}{SEPARATOR}{item.name}"
    if item.items is None:
        return ModuleMetadata(name=item.name, path=child_path)
    return walk_items(item.name, item.items, path=child_path)
