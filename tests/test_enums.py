from orderbookdemo.enums import OrderType, Side


def test_order_type_members_in_declared_order():
    assert [OrderType(member.value).name for member in OrderType] == [
        "MARKET",
        "GOOD_TILL_CANCEL",
        "FILL_AND_KILL",
        "FILL_OR_KILL",
    ]


def test_side_members():
    assert [Side(member.value).name for member in Side] == ["BUY", "SELL"]


def test_members_are_distinct():
    assert len({OrderType(member.value) for member in OrderType}) == 4
    assert Side(Side.BUY.value) is not Side(Side.SELL.value)
    assert len({Side(member.value) for member in Side}) == 2


def test_lookup_by_name_and_value_agree():
    assert OrderType(OrderType["MARKET"].value) is OrderType.MARKET
    assert Side(Side["SELL"].value) is Side.SELL