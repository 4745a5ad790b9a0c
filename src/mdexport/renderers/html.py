"""HTML serializer for reflow trees.

Turns a ReflowNode tree into an HTML fragment for on-screen preview. Each
node becomes one element named by its tag and carrying its semantic class.
The output is not sanitized; that is the embedding application's job.

Thread Safety:
HtmlRenderer holds no per-render state. Output is accumulated in a
StringBuilder local to each render() call.

"""

import html
import logging

from mdexport.errors import RenderError
from mdexport.renderers.tree import ReflowNode
from mdexport.stringbuilder import StringBuilder
from mdexport.styles import INLINE_KINDS, REFLOW_SPACER, NodeKind

logger = logging.getLogger(__name__)


def html_escape(s: str) -> str:
    """Escape <, >, & and double quotes (single quotes are left as-is)."""
    return html.escape(s, quote=False).replace('"', "&quot;")


def _class_attr(node: ReflowNode) -> str:
    return f' class="{html_escape(node.class_name)}"' if node.class_name else ""


class HtmlRenderer:
    """Render a reflow tree to HTML.

    Usage:
        >>> from mdexport import render
        >>> HtmlRenderer().render(render("Hello **World**", as_reflow=True))
        '<div class="prose max-w-none p-4">\\n<p class="text-base my-2">Hello <span class="font-bold">World</span></p>\\n</div>\\n'

    Links open in a new browsing context with ``rel="noopener noreferrer"``.

    """

    __slots__ = ()

    def render(self, node: ReflowNode) -> str:
        """Render a reflow tree (normally its DOCUMENT root) to HTML."""
        if not isinstance(node, ReflowNode):
            raise RenderError("Expected a ReflowNode", node)
        sb = StringBuilder()
        self._render_node(node, sb)
        result = sb.build()
        logger.debug("Rendered %d character(s) of HTML", len(result))
        return result

    def _render_node(self, node: ReflowNode, sb: StringBuilder) -> None:
        if node.kind in INLINE_KINDS:
            self._render_inline(node, sb)
            return

        match node.kind:
            case NodeKind.RULE:
                sb.append(f"<{node.tag}{_class_attr(node)} />\n")
            case NodeKind.SPACER:
                height = node.height if node.height is not None else REFLOW_SPACER.minimum
                sb.append(
                    f'<{node.tag}{_class_attr(node)} style="height: {height:g}{REFLOW_SPACER.measure}">'
                    f"</{node.tag}>\n"
                )
            case NodeKind.DOCUMENT | NodeKind.BULLET_LIST | NodeKind.ORDERED_LIST:
                sb.append(f"<{node.tag}{_class_attr(node)}>\n")
                for child in node.children:
                    self._render_node(child, sb)
                sb.append(f"</{node.tag}>\n")
            case _:
                sb.append(f"<{node.tag}{_class_attr(node)}>")
                for child in node.children:
                    self._render_node(child, sb)
                sb.append(f"</{node.tag}>\n")

    def _render_inline(self, node: ReflowNode, sb: StringBuilder) -> None:
        match node.kind:
            case NodeKind.TEXT:
                sb.append(html_escape(node.text or ""))
            case NodeKind.CODE:
                sb.append(f"<{node.tag}{_class_attr(node)}>")
                sb.append(html_escape(node.text or ""))
                sb.append(f"</{node.tag}>")
            case NodeKind.LINK:
                href = html_escape(node.href or "")
                sb.append(
                    f'<{node.tag} href="{href}"{_class_attr(node)}'
                    ' target="_blank" rel="noopener noreferrer">'
                )
                for child in node.children:
                    self._render_inline(child, sb)
                sb.append(f"</{node.tag}>")
            case _:
                sb.append(f"<{node.tag}{_class_attr(node)}>")
                for child in node.children:
                    self._render_inline(child, sb)
                sb.append(f"</{node.tag}>")
