"""
Gearbox Layout Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Snapping grid and snap thresholds
- Viewport limits and defaults
- Linked movement tolerances
- Default parameters for every component type
- Rendering colors for the plan-view canvas

All distances are world units (millimetres) unless stated otherwise.
"""

# ======================================================================
# SNAPPING GRID
# ======================================================================

# Base grid unit. Shafts and free parts quantize to this, housings to twice it.
SNAP_GRID = 10
HOUSING_GRID_MULTIPLIER = 2

# ======================================================================
# SNAP THRESHOLDS (screen pixels)
# ======================================================================
# Divided by the current zoom before use, so the pull feels the same at
# every zoom level.

MESH_SNAP_DISTANCE_PX = 20
SHAFT_SNAP_DISTANCE_PX = 25

# Guide label for gear mesh snapping
MESH_GUIDE_LABEL_FORMAT = "Mesh Dist: {distance}mm"

# ======================================================================
# VIEWPORT
# ======================================================================

ZOOM_MIN = 0.1
ZOOM_MAX = 5.0

# Wheel delta to additive zoom amount (zoom += -deltaY * factor)
WHEEL_ZOOM_FACTOR = 0.002

# Qt reports wheel steps in eighths of a degree (120 per notch); one notch
# is treated as 100 device pixels of scroll
WHEEL_ANGLE_PER_NOTCH = 120
WHEEL_PIXELS_PER_NOTCH = 100

# Toolbar zoom in/out multiplier
ZOOM_BUTTON_STEP = 1.2

# World coordinates of the top-left corner at startup and after reset
DEFAULT_VIEWPORT_X = -500.0
DEFAULT_VIEWPORT_Y = -400.0
DEFAULT_ZOOM = 1.0

# ======================================================================
# LINKED MOVEMENT
# ======================================================================

# A part counts as sitting on a shaft axis if its y is within this distance
LINK_ALIGN_TOLERANCE = 0.1

# Extra axial reach past each shaft end that still carries parts along
LINK_SPAN_MARGIN = 20

# ======================================================================
# ITEM DEFAULTS
# ======================================================================

VALID_ROTATIONS = (0, 90, 180, 270)
DEFAULT_ROTATION = 0

MIN_GEAR_TEETH = 6

DEFAULT_SPUR = {
    'teeth': 40, 'module': 4.0, 'pressure_angle': 20.0,
    'hole_diameter': 20.0, 'thickness': 20.0, 'color': '#3b82f6',
}
DEFAULT_HELICAL = {
    'teeth': 30, 'module': 4.0, 'pressure_angle': 20.0,
    'hole_diameter': 20.0, 'thickness': 30.0, 'helix_angle': 15.0, 'color': '#6366f1',
}
DEFAULT_BEVEL = {
    'teeth': 24, 'module': 4.0, 'pressure_angle': 20.0,
    'hole_diameter': 20.0, 'thickness': 25.0, 'color': '#8b5cf6',
}
DEFAULT_WORM = {'length': 80.0, 'diameter': 40.0, 'module': 4.0, 'color': '#14b8a6'}

# (length, diameter) per segment, left to right
DEFAULT_SHAFT_SEGMENTS = ((50.0, 20.0), (150.0, 30.0), (50.0, 20.0))
DEFAULT_SHAFT_COLOR = '#e2e8f0'
NEW_SEGMENT_LENGTH = 50.0
NEW_SEGMENT_DIAMETER = 20.0

DEFAULT_BEARING = {
    'width': 15.0, 'outer_diameter': 50.0, 'inner_diameter': 20.0, 'color': '#e2e8f0',
}
DEFAULT_HOUSING = {'width': 400.0, 'height': 300.0, 'color': '#f1f5f9'}

DEFAULT_COUPLING = {
    'width': 40.0, 'outer_diameter': 40.0, 'inner_diameter': 20.0, 'color': '#64748b',
}
DEFAULT_SPACER = {
    'width': 10.0, 'outer_diameter': 40.0, 'inner_diameter': 20.0, 'color': '#cbd5e1',
}
DEFAULT_CIRCLIP = {
    'width': 2.0, 'outer_diameter': 25.0, 'inner_diameter': 20.0, 'color': '#cbd5e1',
}

# ======================================================================
# CANVAS RENDERING
# ======================================================================

CANVAS_BACKGROUND = '#ffffff'
GRID_MINOR_COLOR = '#e2e8f0'
GRID_MAJOR_COLOR = '#cbd5e1'
GRID_MAJOR_EVERY = 5
AXIS_COLOR = '#93c5fd'

ITEM_STROKE_COLOR = '#334155'
ITEM_SELECTED_STROKE_COLOR = '#2563eb'
HOUSING_STROKE_COLOR = '#94a3b8'
SHAFT_CENTERLINE_COLOR = '#94a3b8'

ALIGN_GUIDE_COLOR = '#10b981'
MESH_GUIDE_COLOR = '#f59e0b'

# Minimum grab box for thin parts (world units, half size)
MIN_HIT_HALF_SIZE = 10.0

# Housing outlines are only grabbable near their border (screen pixels)
HOUSING_BORDER_HIT_PX = 6

# Mime type used by the component palette
COMPONENT_MIME_TYPE = 'application/x-component-type'

# ======================================================================
# USER CONFIG
# ======================================================================

CONFIG_DIR_NAME = '.gearbox_studio'
CONFIG_FILE_NAME = 'config.json'
DEFAULT_SNAP_ENABLED = True
DEFAULT_SHOW_GRID = True
