"""Hooks that run around rendering.

A pre-generate hook sees the extracted ``IRArtifactSet`` once and returns
the set to render. A post-generate hook sees each rendered file and
returns the text to write. ``HookChain`` applies both kinds in order:

    hooks = HookChain(pre=[ExcludePrefix("_")], post=[HeaderComment("Do not edit")])
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from .ir import IRArtifactSet


@runtime_checkable
class PreGenerateHook(Protocol):
    def pre_generate(self, artifacts: IRArtifactSet) -> IRArtifactSet:
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    def post_generate(self, path: str, content: str) -> str:
        """Transform the rendered text of the file at relative ``path``."""
        ...


class HeaderComment:
    """Prefix every file with a TypeScript line-comment block.

    Lines already starting with ``//`` are kept as they are; others get a
    ``// `` prefix. A blank line separates the block from the code.
    """

    def __init__(self, text: str):
        lines = text.rstrip("\n").split("\n")
        self.block = "\n".join(
            line if line.startswith("//") else f"// {line}".rstrip() for line in lines
        )

    def post_generate(self, path: str, content: str) -> str:
        return f"{self.block}\n\n{content}"


class ExcludePrefix:
    """Drop object types, inputs and enums whose name starts with ``prefix``.

    Operations are always kept.
    """

    def __init__(self, prefix: str):
        self.prefix = prefix

    def pre_generate(self, artifacts: IRArtifactSet) -> IRArtifactSet:
        artifacts.inputs = [a for a in artifacts.inputs if not a.name.startswith(self.prefix)]
        artifacts.enums = [a for a in artifacts.enums if not a.name.startswith(self.prefix)]
        artifacts.types = [a for a in artifacts.types if not a.name.startswith(self.prefix)]
        return artifacts


class HookChain:
    """Ordered pre- and post-generate hooks for one generator run."""

    def __init__(
        self,
        pre: Iterable[PreGenerateHook] = (),
        post: Iterable[PostGenerateHook] = (),
    ):
        self.pre = list(pre)
        self.post = list(post)

    def apply_pre(self, artifacts: IRArtifactSet) -> IRArtifactSet:
        for hook in self.pre:
            artifacts = hook.pre_generate(artifacts)
        return artifacts

    def apply_post(self, path: str, content: str) -> str:
        for hook in self.post:
            content = hook.post_generate(path, content)
        return content
