"""
Dynamic points rules package.

Validates the dynamic points settings stored on a reaction and calculates
the points to award when the reaction fires.

Modules of interest:
- models: Error codes, validation issues, fires and reactions.
- validator: ReactionValidator (field-path error collector) and
  SettingsValidator.
- calculator: PointsCalculator, which turns an attribute value into an
  integer award under rounding, multiplier and min/max settings.

Validation is strict and runs once when settings are saved. Calculation is
lenient and runs on every fire: it never raises and falls back to 0.
"""
