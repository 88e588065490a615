# makes the nion namespace in this checkout importable when running pytest from the repository root.
