"""Evaluation of the include() directive.

This module provides the IncludeContext carrying the host interpreter's
collaborators and the IncludeResolver that validates an include() argument
list, resolves the target to a listfile, applies the export file policy, loads
the file and binds the result variable.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from listfile.directives.include.collaborators import (
    ExportRegistry,
    FileSystem,
    Interpreter,
    MessageSink,
    ModuleSearch,
    PathUtil,
    PolicyStore,
    VariableStore,
)
from listfile.directives.include.errors import ExportFilePolicyError, IncludeError, IncludeFileNotFoundError
from listfile.directives.include.export_registry import ExportFileRegistry
from listfile.directives.include.include_directive import IncludeOptions, IncludeOutcome, OutcomeKind
from listfile.directives.include.include_directive_parser import IncludeArgumentParser
from listfile.directives.include.include_graph import ListFileGraph
from listfile.directives.include.messages import MessageType, RecordingMessageSink
from listfile.directives.include.paths import LocalFileSystem, LocalPathUtil, ModuleSearchPath
from listfile.directives.include.policy import ExportFilePolicy, PolicyTable
from listfile.directives.include.variables import VariableScope
from listfile.settings import IncludeSettings

log = logging.getLogger(__name__)


@dataclass
class IncludeContext:
    """Everything one include() evaluation needs from its host.

    Attributes:
        interpreter: Parses and executes the included listfile
        current_source_dir: Directory relative specifiers are resolved against
        variables: Receives the result variable binding
        messages: Receives warnings and errors; also knows whether a fatal error occurred
        policies: Reports the status of the export file policy
        module_search: Looks up module files by name
        export_registry: Knows which files export() generates and how to generate them
        path_util: Path primitives
        file_system: Existence checks
        current_list_file: The listfile containing the directive, if known
        dependencies: Records successful includes when given
    """

    interpreter: Interpreter
    current_source_dir: str
    variables: VariableStore = field(default_factory=VariableScope)
    messages: MessageSink = field(default_factory=RecordingMessageSink)
    policies: PolicyStore = field(default_factory=PolicyTable)
    module_search: ModuleSearch = field(default_factory=ModuleSearchPath)
    export_registry: ExportRegistry = field(default_factory=ExportFileRegistry)
    path_util: PathUtil = field(default_factory=LocalPathUtil)
    file_system: FileSystem = field(default_factory=LocalFileSystem)
    current_list_file: str | None = None
    dependencies: ListFileGraph | None = None


class IncludeResolver:
    """Evaluator for include() directives.

    The resolver holds no per-directive state, so one instance can evaluate
    any number of directives against any number of contexts.
    """

    def __init__(self, settings: IncludeSettings | None = None) -> None:
        """Initialize the resolver.

        Args:
            settings: Directive settings; defaults are used when omitted.
        """
        self.settings = settings or IncludeSettings()
        self._parser = IncludeArgumentParser(self.settings)
        self._export_policy = ExportFilePolicy(self.settings.export_policy_id)

    def run(self, arguments: Sequence[str], context: IncludeContext) -> IncludeOutcome:
        """Evaluate an include() directive, reporting failure as an outcome.

        Args:
            arguments: The expanded directive arguments, target first.
            context: The host's collaborators.

        Returns:
            The outcome; its ``error`` is set when the directive failed.
        """
        try:
            return self.execute(arguments, context)
        except IncludeError as e:
            log.debug(f"include() failed: {e.message}")
            return IncludeOutcome(kind=OutcomeKind.FAILED, error=e)

    def execute(self, arguments: Sequence[str], context: IncludeContext) -> IncludeOutcome:
        """Evaluate an include() directive.

        Args:
            arguments: The expanded directive arguments, target first.
            context: The host's collaborators.

        Returns:
            The outcome of a successful evaluation.

        Raises:
            IncludeArgumentError: The argument list is malformed.
            ExportFilePolicyError: Policy forbids including the export file.
            IncludeFileNotFoundError: A mandatory file could not be loaded.
        """
        options = self._parser.parse(arguments)

        if not options.target:
            context.messages.report(MessageType.AUTHOR_WARNING, "include() given empty file name (ignored).")
            return IncludeOutcome(kind=OutcomeKind.IGNORED)

        path = self.resolve_path(options.target, context)
        self._check_export_file(path, context)

        if options.optional and not context.file_system.exists(path):
            log.debug(f"Optional include {options.target} not found at {path}")
            return self._not_loaded(options, path, context)

        loaded = context.interpreter.load_file(path, options.no_policy_scope)

        result_value = None
        if options.result_variable is not None:
            result_value = path if loaded else self.settings.not_found_value
            context.variables.define(options.result_variable, result_value)

        if loaded:
            log.info(f"Included {path}")
            if context.dependencies is not None and context.current_list_file is not None:
                context.dependencies.add(context.current_list_file, path, options)
            return IncludeOutcome(
                kind=OutcomeKind.LOADED,
                path=path,
                result_variable=options.result_variable,
                result_value=result_value,
            )

        if not options.optional and not context.messages.fatal_error_occurred():
            raise IncludeFileNotFoundError(f"could not find load file:\n  {options.target}", options.target)

        return IncludeOutcome(
            kind=OutcomeKind.NOT_LOADED,
            path=path,
            result_variable=options.result_variable,
            result_value=result_value,
        )

    def resolve_path(self, target: str, context: IncludeContext) -> str:
        """Resolve an include() target to a canonical absolute path.

        A relative target is first tried as a module name; a module found on
        the search path wins over a file relative to the source directory.
        """
        effective = target
        if not context.path_util.is_absolute(target):
            module_path = context.module_search.resolve(target + self.settings.module_suffix)
            if module_path:
                log.debug(f"Resolved {target} as module {module_path}")
                effective = module_path

        return context.path_util.collapse(effective, context.current_source_dir)

    def _check_export_file(self, path: str, context: IncludeContext) -> None:
        if not context.export_registry.is_exported_targets_file(path):
            return

        decision = self._export_policy.evaluate(path, context.policies.get_status(self._export_policy.policy_id))
        if decision.severity is not None and decision.text is not None:
            context.messages.report(decision.severity, decision.text)

        # Export files are written lazily and must be generated before anyone reads them
        context.export_registry.materialize_and_generate(path)

        if decision.aborts:
            raise ExportFilePolicyError(decision.text or "", path)

    def _not_loaded(self, options: IncludeOptions, path: str, context: IncludeContext) -> IncludeOutcome:
        result_value = None
        if options.result_variable is not None:
            result_value = self.settings.not_found_value
            context.variables.define(options.result_variable, result_value)
        return IncludeOutcome(
            kind=OutcomeKind.NOT_LOADED,
            path=path,
            result_variable=options.result_variable,
            result_value=result_value,
        )
