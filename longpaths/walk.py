# (c) Andrew Chen (https://github.com/achen1296)

import os
from typing import Callable, Iterable

from more_itertools import consume

from .consts import *
from .paths import native_path


def is_link(path: PathLike) -> bool:
    """ Symlinks, and junctions on Windows. """
    native = native_path(path)
    return os.path.islink(native) or os.path.isjunction(native)


def walk[T](root: PathLike = ".", *,
            file_action: Callable[[str, int], Iterable[T] | None] | None = None,
            dir_action: Callable[[str, int], Iterable[T] | None] | None = None,
            dir_post_action: Callable[[str, int], Iterable[T] | None] | None = None,
            symlink_action: Callable[[str, int], Iterable[T] | None] | None = None,
            not_exist_action: Callable[[str, int],
                                       Iterable[T] | None] | None = None,
            side_effects: bool = False,
            ) -> Iterable[T]:
    """ Walks over path strings, going through the long path form for every OS call, so trees deeper than the Windows path limit can be walked. Paths given to the actions are joined onto `root` as given, never in the long path form.

    For directories, dir_action is called first, then the contents are recursively walked over before dir_post_action is called.

    If symlink_action is not specified, symlinks (and junctions) are treated like the kind of file it points to (or as a file if the link is broken). If symlink_action is specified, then only that will be used on them.

    The second argument to each action is the depth from the root, which has depth 0.

    For all actions, if the return value is not None, it is yielded from -- so it must be iterable. If the walk is only for side effects, specify side_effects = True to consume the generator, which also results in an empty return value. """

    def walk_recursive(root: str, depth: int):
        native = native_path(root)
        if symlink_action is not None and is_link(root):
            if (symlink_result := symlink_action(root, depth)) is not None:
                yield from symlink_result
        elif not os.path.lexists(native):
            if not_exist_action is not None and (not_exist_result := not_exist_action(root, depth)) is not None:
                yield from not_exist_result
        elif not os.path.isdir(native):
            # includes broken symlinks
            if file_action is not None and (file_result := file_action(root, depth)) is not None:
                yield from file_result
        else:
            if dir_action is not None and (dir_result := dir_action(root, depth)) is not None:
                yield from dir_result
            # sorted so that results do not depend on directory order
            for name in sorted(os.listdir(native)):
                yield from walk_recursive(os.path.join(root, name), depth+1)
            if dir_post_action is not None and (dir_post_result := dir_post_action(root, depth)) is not None:
                yield from dir_post_result

    gen = walk_recursive(os.fspath(root), 0)
    if side_effects:
        consume(gen)
        return []
    else:
        return gen
