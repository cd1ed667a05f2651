from __future__ import annotations

from gedcom_chart.chart.selection import get_selection
from gedcom_chart.convert import ConversionResult, convert_gedcom
from gedcom_chart.core.context import ConversionContext
from gedcom_chart.exporter import export_result_json
from gedcom_chart.loader import read_gedcom
from gedcom_chart.loader.image_loader import load_images
from gedcom_chart.records.software import get_software


class Pipeline:
    """
    Orchestrates a file-level conversion: read, convert, export.
    No conversion logic lives here.
    """

    def __init__(self, context: ConversionContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> ConversionResult:
        self.log.info("Pipeline starting: %s", self.ctx.input_path)

        try:
            text = read_gedcom(self.ctx.input_path)
            images = load_images(self.ctx.images_path)

            result = convert_gedcom(text, images)

            selection = get_selection(result.chart_data, self.ctx.indi, self.ctx.generation)
            software = get_software(result.record_index.head)

            self.ctx.stats.update(
                {
                    "individuals": len(result.chart_data["individuals"]),
                    "families": len(result.chart_data["families"]),
                    "other": len(result.record_index.other),
                    "images": len(images),
                    "software": software,
                    "selection": selection,
                }
            )

            if self.ctx.output_path:
                indent = self.ctx.config.output.get("indent", 2) if self.ctx.pretty else None
                export_result_json(
                    result,
                    self.ctx.output_path,
                    indent=indent,
                    selection=selection,
                    software=software,
                )

        except Exception:
            self.log.exception("Pipeline execution failed")
            raise

        self.log.info("Pipeline completed successfully")
        return result
