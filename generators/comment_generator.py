"""
Reads the documentation attached to descriptors and attaches it to generated statements.
"""
from typing import Optional

COMMENT_MODES = ("append", "replace")


class CommentGenerator:
    def get_comment_block(self, node, leading_only: bool = False) -> Optional[str]:
        """
        Returns the comment text for an enum or enum value descriptor, or None if it has none.
        With leading_only, only the block attached directly above the node is returned.
        """
        leading = getattr(node, 'leading_comments', None)
        if leading_only:
            return leading
        parts = [c for c in (leading, getattr(node, 'trailing_comments', None)) if c]
        if not parts:
            return None
        return "\n\n".join(parts)

    def get_type_comment_block(self, descriptor) -> str:
        block = self.get_comment_block(descriptor)
        block = block + "\n\n" if block else ""
        block += f"@generated from protobuf enum {descriptor.qualified_name}"
        if getattr(descriptor, 'deprecated', False):
            block += "\n@deprecated"
        return block

    def add_comments_for_descriptor(self, statement, descriptor, mode: str = "append") -> None:
        if mode not in COMMENT_MODES:
            raise ValueError(f"Unknown comment mode '{mode}', expected one of {COMMENT_MODES}.")
        block = self.get_type_comment_block(descriptor)
        if mode == "append" and statement.leading_comment:
            statement.leading_comment = f"{statement.leading_comment}\n\n{block}"
        else:
            statement.leading_comment = block
