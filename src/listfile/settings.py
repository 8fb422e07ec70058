"""Settings shared by the listfile directive handlers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IncludeSettings:
    """Tunables for the include() directive.

    Attributes:
        module_suffix: Suffix appended to a bare specifier to form a module file name
        not_found_value: Value bound to the result variable when nothing was loaded
        export_policy_id: Policy governing direct inclusion of export()-generated files
        max_arguments: Maximum number of directive arguments, specifier included
    """

    module_suffix: str = ".cmake"
    not_found_value: str = "NOTFOUND"
    export_policy_id: str = "CMP0024"
    max_arguments: int = 4
