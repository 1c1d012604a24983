from config_store.loaders.text import load_config_file, parse_line, parse_lines

__all__ = ["load_config_file", "parse_line", "parse_lines"]
