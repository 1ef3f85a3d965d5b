from project_context.model import ProjectContext
from project_context.state import ContextStore


def test_set_replaces_and_notifies_in_order():
	store = ContextStore()
	seen = []
	store.subscribe(lambda ws, ctx: seen.append(("first", ws, ctx.summary)))
	store.subscribe(lambda ws, ctx: seen.append(("second", ws, ctx.summary)))

	store.set("/w", ProjectContext(summary="one"))
	store.set("/w", ProjectContext(summary="two"))

	assert store.get("/w").summary == "two"
	assert seen == [
		("first", "/w", "one"),
		("second", "/w", "one"),
		("first", "/w", "two"),
		("second", "/w", "two"),
	]


def test_get_unknown_workspace():
	assert ContextStore().get("/nowhere") is None


def test_unsubscribe_and_failing_listener():
	store = ContextStore()
	calls = []

	def boom(ws, ctx):
		raise RuntimeError("listener failed")

	store.subscribe(boom)
	unsubscribe = store.subscribe(lambda ws, ctx: calls.append(ws))
	store.set("/a", ProjectContext())
	unsubscribe()
	store.set("/b", ProjectContext())
	assert calls == ["/a"]
