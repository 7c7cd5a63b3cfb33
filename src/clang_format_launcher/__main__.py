from clang_format_launcher.main import entrypoint

entrypoint()
