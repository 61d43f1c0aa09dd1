"""YAML nodes with their helpers, and the compiler context."""