"""Domain building blocks shared by the apps."""
