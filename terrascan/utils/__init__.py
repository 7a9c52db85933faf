"""Path, document loading, JSON printing and error wrapping helpers."""