"""UI components for the P33L PFP editor

- asset_sidebar: hat and frame pickers
- canvas_widget: live preview and pointer input
- property_sidebar: numeric hat and frame controls
- transform_widgets: hat control buttons, hit-testing and the gesture state machine

Widgets are imported from their modules directly; the compositor depends on
transform_widgets, so this package stays free of eager widget imports.
"""
