"""Custom pylint rules for project typing and assembler contracts."""

from __future__ import annotations

from collections.abc import Iterable

from astroid import nodes
from pylint.checkers import BaseChecker
from pylint.lint import PyLinter


_MESSAGE_PREFER_OPTIONAL = "prefer-optional"
_MESSAGE_NO_OBJECT_ANNOTATION = "no-object-annotation"
_MESSAGE_ASSEMBLER_RETURNS_NONE = "assembler-returns-none"
_ASSEMBLER_PREFIX = "assemble_"


class ProjectRulesChecker(BaseChecker):
    """Project-specific AST checks."""

    name = "project-rules"

    msgs = {
        "C9501": (
            "Use Optional[T] instead of T | None in annotations",
            _MESSAGE_PREFER_OPTIONAL,
            "Project style requires Optional[T] for nullable annotations.",
        ),
        "C9502": (
            "Avoid object in type annotations; use a more specific type",
            _MESSAGE_NO_OBJECT_ANNOTATION,
            "Project style avoids object annotations when a better type exists.",
        ),
        "E9503": (
            "Assembler %r must return a description, never None",
            _MESSAGE_ASSEMBLER_RETURNS_NONE,
            "Functions named assemble_* return empty descriptions instead of None.",
        ),
    }

    def visit_annassign(self, node: nodes.AnnAssign) -> None:
        """Validate annotation style for annotated assignments."""
        self._check_annotation(node.annotation)

    def visit_arguments(self, node: nodes.Arguments) -> None:
        """Validate annotation style for function arguments."""
        for annotation in self._iter_argument_annotations(node):
            self._check_annotation(annotation)

    def visit_functiondef(self, node: nodes.FunctionDef) -> None:
        """Validate return annotations, including assembler return types."""
        self._check_returns(node)

    def visit_asyncfunctiondef(self, node: nodes.AsyncFunctionDef) -> None:
        """Validate return annotations of coroutine functions."""
        self._check_returns(node)

    def visit_return(self, node: nodes.Return) -> None:
        """Reject ``return`` and ``return None`` inside assemblers."""
        frame = node.frame()
        if not isinstance(frame, nodes.FunctionDef) or not _is_assembler(frame):
            return
        if node.value is None or _is_none_literal(node.value):
            self.add_message(_MESSAGE_ASSEMBLER_RETURNS_NONE, node=node, args=(frame.name,))

    def _check_returns(self, node: nodes.FunctionDef) -> None:
        if node.returns is None:
            return
        self._check_annotation(node.returns)
        if _is_assembler(node) and _annotation_allows_none(node.returns):
            self.add_message(_MESSAGE_ASSEMBLER_RETURNS_NONE, node=node.returns, args=(node.name,))

    def _check_annotation(self, annotation: nodes.NodeNG) -> None:
        for optional_union in self._iter_optional_pipe_unions(annotation):
            self.add_message(_MESSAGE_PREFER_OPTIONAL, node=optional_union)
        for object_name in self._iter_object_annotations(annotation):
            self.add_message(_MESSAGE_NO_OBJECT_ANNOTATION, node=object_name)

    @staticmethod
    def _iter_argument_annotations(arguments: nodes.Arguments) -> Iterable[nodes.NodeNG]:
        for annotation in arguments.posonlyargs_annotations:
            if annotation is not None:
                yield annotation
        for annotation in arguments.annotations:
            if annotation is not None:
                yield annotation
        for annotation in arguments.kwonlyargs_annotations:
            if annotation is not None:
                yield annotation
        if arguments.varargannotation is not None:
            yield arguments.varargannotation
        if arguments.kwargannotation is not None:
            yield arguments.kwargannotation

    @staticmethod
    def _iter_object_annotations(annotation: nodes.NodeNG) -> Iterable[nodes.Name]:
        for candidate in annotation.nodes_of_class(nodes.Name):
            if candidate.name == "object":
                yield candidate

    @staticmethod
    def _iter_optional_pipe_unions(annotation: nodes.NodeNG) -> Iterable[nodes.BinOp]:
        for candidate in annotation.nodes_of_class(nodes.BinOp):
            if candidate.op != "|":
                continue
            if _is_none_literal(candidate.left) or _is_none_literal(candidate.right):
                yield candidate


def _is_assembler(node: nodes.FunctionDef) -> bool:
    return node.name.startswith(_ASSEMBLER_PREFIX)


def _annotation_allows_none(annotation: nodes.NodeNG) -> bool:
    if _is_none_literal(annotation):
        return True
    for candidate in annotation.nodes_of_class(nodes.Name):
        if candidate.name == "Optional":
            return True
    return any(True for _ in ProjectRulesChecker._iter_optional_pipe_unions(annotation))


def _is_none_literal(node: nodes.NodeNG) -> bool:
    return isinstance(node, nodes.Const) and node.value is None


def register(linter: PyLinter) -> None:
    """Register checker."""
    linter.register_checker(ProjectRulesChecker(linter))
