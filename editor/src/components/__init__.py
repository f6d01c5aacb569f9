"""UI components for the Gearbox layout editor

- canvas_widget: LayoutCanvas, the interactive plan view
- canvas_widgets: Qt-free canvas logic (controller, drag session, geometry)
  plus the painting and input mixins used by LayoutCanvas
- component_palette: drag source for new components
- zoom_toolbar: zoom, reset, snap and grid controls

Widgets are imported from their modules directly so the Qt-free parts of
canvas_widgets can be used without a display.
"""
