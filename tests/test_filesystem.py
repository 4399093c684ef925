"""
Tests for the folder tree.
"""

from shellcommander.filesystem import (
    FolderTree,
    ROOT_FOLDERS,
    USER_FOLDERS,
)


class TestDefaultLayout:
    """Test cases for the folders a new tree starts with."""

    def test_root_node(self, tree):
        """The root has an empty name, path "/" and no parent."""
        assert tree.root.name == ''
        assert tree.root.full_path == '/'
        assert tree.root.is_root
        assert tree.parent_of(tree.root) is None

    def test_root_children_in_order(self, tree):
        """Top level folders appear in the documented order."""
        names = [child.name for child in tree.children_of(tree.root)]
        assert names == [
            'bin', 'sbin', 'etc', 'dev', 'proc', 'var', 'tmp', 'usr',
            'home', 'boot', 'lib', 'opt', 'mnt', 'media', 'srv'
        ]
        assert names == ROOT_FOLDERS

    def test_home_user_children(self, tree):
        """The user's home holds the dot folders and media folders."""
        home = tree.resolve('/home')
        assert [child.name for child in tree.children_of(home)] == ['user']

        user = tree.resolve('/home/user')
        assert [child.name for child in tree.children_of(user)] == USER_FOLDERS

    def test_unpopulated_tree(self, empty_tree):
        """A tree built without the layout has only the root."""
        assert len(empty_tree.nodes) == 1
        assert list(empty_tree.children_of(empty_tree.root)) == []


class TestResolve:
    """Test cases for path resolution."""

    def test_resolve_root(self, tree):
        """Resolving "/" returns the root itself."""
        assert tree.resolve('/') is tree.root

    def test_every_node_resolves_to_its_own_path(self, tree):
        """Each node's full path resolves back to that node."""
        for node in tree.nodes[1:]:
            resolved = tree.resolve(node.full_path)
            assert resolved is node
            assert resolved.full_path == node.full_path

    def test_resolve_nested(self, tree):
        """Nested paths are walked one segment at a time."""
        node = tree.resolve('/home/user/Documents')
        assert node.name == 'Documents'
        assert node.full_path == '/home/user/Documents'

    def test_missing_segment(self, tree):
        """A missing segment at any depth fails the whole lookup."""
        assert tree.resolve('/nope') is None
        assert tree.resolve('/home/nope') is None
        assert tree.resolve('/nope/user') is None

    def test_trailing_slash_fails(self, tree):
        """A trailing slash asks for an empty-named child."""
        assert tree.resolve('/home/') is None

    def test_relative_path_fails(self, tree):
        """Only absolute paths are resolved."""
        assert tree.resolve('home') is None
        assert tree.resolve('') is None


class TestAddFolder:
    """Test cases for inserting folders."""

    def test_full_path_under_root(self, empty_tree):
        """Children of the root get a single leading slash."""
        node = empty_tree.add_folder(empty_tree.root, 'a')
        assert node.full_path == '/a'
        assert empty_tree.parent_of(node) is empty_tree.root

    def test_full_path_under_nested_parent(self, tree):
        """Children of other folders extend the parent's path."""
        user = tree.resolve('/home/user')
        node = tree.add_folder(user, 'Music')
        assert node.full_path == '/home/user/Music'
        assert tree.parent_of(node) is user
        assert tree.resolve('/home/user/Music') is node

    def test_nodes_reference_each_other_by_index(self, tree):
        """Parent and child links are indices into the tree."""
        user = tree.resolve('/home/user')
        assert isinstance(user.parent, int)
        assert all(isinstance(index, int) for index in user.children)
        assert tree.nodes[user.parent].full_path == '/home'

    def test_duplicate_names_are_kept(self, empty_tree):
        """Duplicate names are both inserted and lookup returns the first."""
        first = empty_tree.add_folder(empty_tree.root, 'dup')
        second = empty_tree.add_folder(empty_tree.root, 'dup')

        assert first is not second
        assert len(list(empty_tree.children_of(empty_tree.root))) == 2
        assert empty_tree.get_child_by_name(empty_tree.root, 'dup') is first
        assert empty_tree.resolve('/dup') is first

    def test_empty_name_is_accepted(self, tree):
        """Empty names are not rejected."""
        home = tree.resolve('/home')
        node = tree.add_folder(home, '')
        assert node.full_path == '/home/'
        assert tree.resolve('/home/') is node

    def test_empty_name_under_root_shares_root_path(self, empty_tree):
        """An empty-named child of the root gets the root's path."""
        node = empty_tree.add_folder(empty_tree.root, '')
        assert not node.is_root
        assert node.full_path == '/'
        assert empty_tree.resolve('/') is empty_tree.root

    def test_slash_in_name_is_accepted_but_unreachable(self, empty_tree):
        """A name containing a slash is stored but cannot be resolved by path."""
        node = empty_tree.add_folder(empty_tree.root, 'a/b')
        assert node.full_path == '/a/b'
        assert empty_tree.resolve('/a/b') is None
        assert empty_tree.get_child_by_name(empty_tree.root, 'a/b') is node


class TestWalk:
    """Test cases for following child names."""

    def test_walk_from_folder(self, tree):
        home = tree.resolve('/home')
        assert tree.walk(home, ['user', 'Videos']).full_path == '/home/user/Videos'

    def test_walk_no_segments(self, tree):
        home = tree.resolve('/home')
        assert tree.walk(home, []) is home

    def test_walk_missing(self, tree):
        assert tree.walk(tree.root, ['home', 'admin']) is None
