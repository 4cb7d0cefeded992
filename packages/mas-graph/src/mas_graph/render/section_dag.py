import graphviz
from mas_core.models.report import Report
from mas_core.models.status import Status

STATUS_FILL = {
    Status.GO: "palegreen",
    Status.WARN: "lightgoldenrod1",
    Status.NO_GO: "lightcoral",
    Status.SKIP: "lightgrey",
}


def render_section_dag(report: Report) -> graphviz.Digraph:
    """Draw sections as nodes and dependencies as edges (dependency -> dependent).

    Node names are generated (``section_<n>``, ``missing_<n>``) because graphviz
    reads a colon in an edge endpoint as a port. Sections sharing an id
    collapse into one node; dependencies on ids that no section carries are
    drawn as dashed grey placeholders.
    """
    dot = graphviz.Digraph("mas_section_dag", format="svg")
    dot.attr(rankdir="LR", label=report.title or report.project or "sections", labelloc="t")
    dot.attr("node", shape="box", style="rounded,filled", fontname="Helvetica")

    names: dict[str, str] = {}
    for section in report.sections:
        if section.id in names:
            continue
        names[section.id] = f"section_{len(names)}"
        label = f"{section.display_name}\\n({section.id})\\n{section.status.value}"
        dot.node(names[section.id], label=label, fillcolor=STATUS_FILL[section.status])

    missing: dict[str, str] = {}
    for section in report.sections:
        for dep in dict.fromkeys(section.depends_on):
            if dep in names:
                dot.edge(names[dep], names[section.id])
                continue
            if dep not in missing:
                missing[dep] = f"missing_{len(missing)}"
                dot.node(
                    missing[dep],
                    label=f"{dep}\\n(missing)",
                    style="dashed",
                    color="grey",
                    fontcolor="grey",
                )
            dot.edge(missing[dep], names[section.id], style="dashed", color="grey")

    return dot
