"""Version information for locale-checker."""

__version__ = "1.2.0"
__author__ = "Sezgin Paksoy"
__description__ = "Checks template translation keys against per-locale resource bundles"

# Changelog:
# 1.2.0 - Missing bundle policy
#        - New --missing-bundle/-m option (forbid | allow | create)
#        - 'create' writes empty bundle files for every missing bundle
#        - Created bundles are listed in the console and JSON reports
#        - Configurable locale depth for nested layouts (locales/US/en)
#
# 1.1.0 - Tree keys
#        - mode="json" keys cover nested bundle keys like mode="paired"
#        - Tree keys configurable through check.tree_modes
#        - Ignore patterns (--ignore/-i, check.ignore)
#        - Concurrent template and bundle loading
#        - JSON report output (--json)
#
# 1.0.0 - First release
#        - Missing bundle, unused bundle and invalid bundle detection
#        - Paired keys cover indexed bundle keys (items[0].label)
#        - Colored console output
#        - Exit code 1 on findings, 2 on unexpected errors
