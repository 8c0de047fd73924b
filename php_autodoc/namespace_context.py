"""Per-file namespace and import state used to resolve class references."""

from php_autodoc.models import NAMESPACE_SEPARATOR


class NamespaceContext:
    """Maps simple and aliased class names to fully-qualified names.

    A fresh context is created for every source file and filled in as the
    file's namespace and use statements are visited, in file order.
    """

    def __init__(self, namespace: str | None = None) -> None:
        """Start in ``namespace`` (global when None) with no aliases."""
        self.current_namespace: str | None = namespace or None
        self.alias_map: dict[str, str] = {}

    def set_namespace(self, namespace: str | None) -> None:
        """Enter ``namespace``; None or empty returns to the global namespace."""
        self.current_namespace = namespace or None

    def add_alias(self, alias: str, target_fqn: str) -> None:
        """Register an imported name. A later import of the same alias wins."""
        self.alias_map[alias] = target_fqn.lstrip(NAMESPACE_SEPARATOR)

    def reset(self) -> None:
        """Clear both the namespace and every alias."""
        self.current_namespace = None
        self.alias_map = {}

    def resolve(self, reference: str) -> str:
        """Resolve a class reference to its fully-qualified name."""
        # Already absolute.
        if reference.startswith(NAMESPACE_SEPARATOR):
            return reference.lstrip(NAMESPACE_SEPARATOR)

        # Explicit imports beat positional namespace membership.
        if reference in self.alias_map:
            return self.alias_map[reference]

        # Anything with a separator is treated as already qualified. This
        # does not expand a prefix imported as a namespace alias.
        if NAMESPACE_SEPARATOR in reference:
            return reference

        if self.current_namespace:
            return f"{self.current_namespace}{NAMESPACE_SEPARATOR}{reference}"

        return reference
