from enumerable_weakrefs.utils.chain import Record, RecordChain


def make_chain(*keys):
    chain = RecordChain()
    records = {}
    for key in keys:
        records[key] = Record(key, token=None)
        chain.append(records[key])
    return chain, records


def keys_of(records):
    return [record.key for record in records]


class TestRecordChain:
    def test_append_and_iterate(self):
        chain, records = make_chain("a", "b", "c")
        assert keys_of(chain) == ["a", "b", "c"]
        assert chain.head is records["a"]
        assert chain.tail is records["c"]
        assert chain
        assert not RecordChain()

    def test_unlink(self):
        chain, records = make_chain("a", "b", "c")

        chain.unlink(records["b"])
        assert keys_of(chain) == ["a", "c"]
        assert not records["b"].linked

        chain.unlink(records["b"])  # no-op
        assert keys_of(chain) == ["a", "c"]

        chain.unlink(records["a"])
        assert chain.head is records["c"]
        chain.unlink(records["c"])
        assert chain.head is None and chain.tail is None
        assert keys_of(chain) == []

    def test_unlink_ahead_of_walk(self):
        chain, records = make_chain("a", "b", "c")
        seen = []
        for record in chain:
            seen.append(record.key)
            if record.key == "a":
                chain.unlink(records["b"])
        assert seen == ["a", "c"]

    def test_unlink_current_during_walk(self):
        chain, records = make_chain("a", "b", "c", "d")
        seen = []
        for record in chain:
            seen.append(record.key)
            if record.key == "b":
                chain.unlink(record)
                chain.unlink(records["c"])
        assert seen == ["a", "b", "d"]
        assert keys_of(chain) == ["a", "d"]

    def test_append_during_walk(self):
        chain, _ = make_chain("a", "b")
        seen = []
        for record in chain:
            seen.append(record.key)
            if record.key == "a":
                chain.append(Record("c", token=None))
        assert seen == ["a", "b", "c"]

    def test_clear(self):
        chain, records = make_chain("a", "b", "c")
        cleared = chain.clear()
        assert keys_of(cleared) == ["a", "b", "c"]
        assert not any(record.linked for record in records.values())
        assert keys_of(chain) == []

    def test_clear_during_walk(self):
        chain, _ = make_chain("a", "b", "c")
        seen = []
        for record in chain:
            seen.append(record.key)
            chain.clear()
            chain.append(Record("d", token=None))
        assert seen == ["a"]
        assert keys_of(chain) == ["d"]
