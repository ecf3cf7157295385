"""Small character, string, stream output and linked-list helpers."""