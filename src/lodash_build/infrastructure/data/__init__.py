"""Static build tables: dependency mapping and preset name lists."""
