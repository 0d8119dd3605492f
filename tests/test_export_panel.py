"""
Export dock behaviour: generated code survives pixel edits and is
cleared when the frame list changes.
"""

from icon_studio.logic.document import Document
from icon_studio.ui.export_panel import ExportPanel


def test_refresh_keeps_generated_code(qapp):
    doc = Document(8, 1)
    panel = ExportPanel(doc)
    panel.generate_single()
    code = panel.code

    doc.active_grid.set_pixel(0, 0, 1)
    panel.refresh()

    assert panel.code == code
    assert not panel.output.isHidden()
    assert panel.btn_copy.isEnabled()


def test_invalidate_hides_output(qapp):
    doc = Document(8, 1)
    panel = ExportPanel(doc)
    panel.generate_animation()
    panel.invalidate()

    assert panel.code == ""
    assert panel.output.isHidden()
    assert not panel.btn_save.isEnabled()
    assert panel.btn_single.text() == "Single Frame (1 bytes)"
