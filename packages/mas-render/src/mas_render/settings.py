from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mas_core.data.loader import load_typed
from mas_core.models.report import DEFAULT_TITLE


class RenderSettings(BaseModel):
    """Layout knobs shared by the renderers.

    ``box_width`` is the number of columns between the two border glyphs of
    the box format; ``task_id_width`` is the column reserved for task ids.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)
    box_width: int = Field(default=76, ge=40)
    task_id_width: int = Field(default=24, ge=8)
    default_title: str = DEFAULT_TITLE

    @model_validator(mode="after")
    def _id_column_fits(self) -> "RenderSettings":
        # id column + icon + status + at least a little detail
        if self.task_id_width > self.box_width - 20:
            raise ValueError(f"task_id_width {self.task_id_width} leaves no room in box_width {self.box_width}")
        return self


def load_render_settings(path: str | Path) -> RenderSettings:
    """Read settings from a YAML (or JSON) file; missing keys take defaults."""
    return load_typed(Path(path), model=RenderSettings)
