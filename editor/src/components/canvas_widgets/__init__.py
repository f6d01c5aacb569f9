"""Canvas logic (Qt-free controller, drag session, geometry) and LayoutCanvas mixins"""
