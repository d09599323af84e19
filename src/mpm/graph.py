"""MPM network export in DOT format."""

from __future__ import annotations

from collections.abc import Sequence

from .scheduler.core import ScheduledTask

START_NODE = "START"
END_NODE = "END"

CRITICAL_STYLE = 'color="red", penwidth=2'


class GraphGenerator:
    """Generate the MPM network (tasks as nodes) as a DOT digraph.

    Synthetic START and END nodes frame the network: START precedes every
    task without predecessors, END follows every terminal task. Critical
    tasks, and arcs between two critical tasks, are drawn red and bold.
    """

    def __init__(self, tasks: Sequence[ScheduledTask], project_duration: int = 0):
        self.tasks = list(tasks)
        self.project_duration = project_duration
        self._critical = {task.id for task in self.tasks if task.is_critical}

    def generate(self) -> str:
        lines = ["digraph MPM {"]
        lines.append("  rankdir=LR;")
        lines.append("  node [shape=box];")
        lines.append("")

        lines.append(f'  {START_NODE} [label="START\\n0", shape=oval];')
        for task in self.tasks:
            lines.append(f"  {self._format_node(task)}")
        lines.append(f'  {END_NODE} [label="END\\n{self.project_duration}", shape=oval];')
        lines.append("")

        lines.append("  // Precedence arcs")
        task_ids = {task.id for task in self.tasks}
        has_successor: set[str] = set()
        for task in self.tasks:
            for pred_id in task.predecessors:
                has_successor.add(pred_id)

        for task in self.tasks:
            if not task.predecessors:
                lines.append(f"  {self._format_edge(START_NODE, task.id)}")
            for pred_id in task.predecessors:
                if pred_id in task_ids:
                    lines.append(f"  {self._format_edge(pred_id, task.id)}")
        for task in self.tasks:
            if task.id not in has_successor:
                lines.append(f"  {self._format_edge(task.id, END_NODE)}")

        lines.append("}")
        return "\n".join(lines)

    def _escape_label(self, label: str) -> str:
        """Escape special characters in DOT labels."""
        return label.replace('"', '\\"').replace("\n", "\\n")

    def _quote_id(self, node_id: str) -> str:
        if node_id.isidentifier():
            return node_id
        return '"' + self._escape_label(node_id) + '"'

    def _format_node(self, task: ScheduledTask) -> str:
        label = (
            f"{self._escape_label(task.name)} ({task.duration})\\n"
            f"ES {task.early_start} | EF {task.early_finish}\\n"
            f"LS {task.late_start} | LF {task.late_finish}"
        )
        attrs = [f'label="{label}"']
        if task.is_critical:
            attrs.append("style=filled")
            attrs.append('fillcolor="#fee2e2"')
            attrs.append(CRITICAL_STYLE)
        return f"{self._quote_id(task.id)} [{', '.join(attrs)}];"

    def _is_critical_edge(self, from_id: str, to_id: str) -> bool:
        ends = {from_id, to_id} - {START_NODE, END_NODE}
        return ends <= self._critical

    def _format_edge(self, from_id: str, to_id: str) -> str:
        edge = f"{self._quote_id(from_id)} -> {self._quote_id(to_id)}"
        if self._is_critical_edge(from_id, to_id):
            return f"{edge} [{CRITICAL_STYLE}];"
        return f"{edge};"
