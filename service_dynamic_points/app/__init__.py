"""
Dynamic Points Service package.

Awards a reaction's points from an event arg (for example a post's comment
count) instead of a fixed amount. It provides:

- app.main: API surface for validating settings, saving reactions and
  computing awards.
- app.rules: Settings validation and the points calculation.
- app.rounding: Rounding methods and their registry.
- app.args: Event arg hierarchies and their resolution.
- app.hooks: The extension and the host-side filter chain and reaction store.

Guidelines:
- Validation is strict; calculation never raises and falls back to 0.
- Dependencies are passed in explicitly; nothing registers itself globally.
"""
