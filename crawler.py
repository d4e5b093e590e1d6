import os
from typing import Iterator
from utils import get_logger

crawler_logger = get_logger("CRAWLER")


def crawl_directory(corpus_dir: str, extension: str = ".html") -> Iterator[tuple[str, str]]:
    """
    Yields (file name, html content) for every page directly inside corpus_dir,
    in file name order. Unreadable files are logged and skipped.

    Parameters:
        corpus_dir (str): directory holding the sample pages
        extension (str): only files with this extension are read
    """
    try:
        file_names = sorted(os.listdir(corpus_dir))
    except OSError as e:
        crawler_logger.error(f"Unable to list corpus directory: {corpus_dir} - {e}")
        return

    html_files = [name for name in file_names if name.endswith(extension)]
    crawler_logger.info(f"Found {len(html_files)} HTML files to index in {corpus_dir}")

    for file_name in html_files:
        file_path = os.path.join(corpus_dir, file_name)
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            crawler_logger.warning(f"Skipping {file_path}: {e}")
            continue
        yield file_name, content
