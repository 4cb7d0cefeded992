from .section_dag import render_section_dag

__all__ = ["render_section_dag"]
