"""Tests for the chat room mediator."""
from pattern_catalog.behavioral.mediator import BasicUser, ChatRoom, PremiumUser, run_demo
from tests.helpers import said


class TestChatRoom:
    """Test message routing through the chat room."""

    def setup_room(self, narrator):
        room = ChatRoom(narrator, "General")
        alice = BasicUser(narrator, room, "Alice")
        bob = PremiumUser(narrator, room, "Bob")
        carol = BasicUser(narrator, room, "Carol")
        return room, alice, bob, carol

    def test_users_join_on_construction(self, narrator):
        room, *_ = self.setup_room(narrator)
        assert room.user_count == 3
        assert said(narrator, "Alice joined 'General'")

    def test_joining_twice_is_ignored(self, narrator):
        room, alice, _, _ = self.setup_room(narrator)
        room.add_user(alice)
        assert room.user_count == 3

    def test_sender_never_receives_own_message(self, narrator):
        room, alice, bob, carol = self.setup_room(narrator)

        delivered = alice.send("Hello")

        assert delivered == 2
        assert alice.inbox == []
        assert bob.inbox == [("Alice", "Hello")]
        assert carol.inbox == [("Alice", "Hello")]

    def test_premium_label_in_narration(self, narrator):
        _, _, bob, _ = self.setup_room(narrator)
        bob.send("Hi all")
        assert said(narrator, 'Bob (Premium) sends: "Hi all"')
        assert bob.tier() == "premium"

    def test_removed_user_gets_nothing(self, narrator):
        room, alice, bob, carol = self.setup_room(narrator)

        assert room.remove_user(bob) is True
        delivered = alice.send("Bob left")

        assert delivered == 1
        assert bob.inbox == []
        assert carol.inbox == [("Alice", "Bob left")]

    def test_removing_non_member_returns_false(self, narrator):
        room, _, bob, _ = self.setup_room(narrator)
        room.remove_user(bob)

        assert room.remove_user(bob) is False
        assert said(narrator, "Bob is not in 'General'")
        assert room.user_count == 2

    def test_lone_user_reaches_nobody(self, narrator):
        room = ChatRoom(narrator, "Empty")
        alone = BasicUser(narrator, room, "Solo")
        assert alone.send("Anyone?") == 0

    def test_demo_runs(self, demo_context):
        run_demo(demo_context)
        assert said(demo_context.narrator, "Broadcasting message from")
