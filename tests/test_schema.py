"""Unit tests for columns, associations and models."""

import pytest
import sqlalchemy as sa

from erdify.attribute import Attribute
from erdify.errors import UnsupportedColumnTypeError
from erdify.schema.association import Association
from erdify.schema.column import Column
from erdify.schema.model import Model
from erdify.type import AssociationMacro, ColumnType, ValidationKind

metadata = sa.MetaData()

users = sa.Table(
    "users",
    metadata,
    sa.Column("id", sa.Integer, primary_key=True),
    sa.Column("email", sa.String(120), nullable=False),
    sa.Column("bio", sa.Text),
    sa.Column("created_at", sa.DateTime),
)

orders = sa.Table(
    "orders",
    metadata,
    sa.Column("id", sa.Integer, primary_key=True),
    sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
    sa.Column("total", sa.Numeric(10, 2)),
    sa.Column("paid", sa.Boolean, default=False),
    sa.Column("receipt", sa.LargeBinary),
)

order_tags = sa.Table(
    "order_tags",
    metadata,
    sa.Column("order_id", sa.Integer, primary_key=True),
    sa.Column("tag", sa.String(30), primary_key=True),
)


def test_column_from_sqlalchemy_string():
    """String length becomes the limit."""
    column = Column.from_sqlalchemy(users.c.email)
    assert column.type == ColumnType.STRING
    assert column.limit == 120
    assert column.null is False


def test_column_from_sqlalchemy_types():
    """SQLAlchemy types map onto column types."""
    assert [Column.from_sqlalchemy(c).type for c in orders.columns] == [
        ColumnType.INTEGER,
        ColumnType.INTEGER,
        ColumnType.DECIMAL,
        ColumnType.BOOLEAN,
        ColumnType.BINARY,
    ]
    assert Column.from_sqlalchemy(users.c.bio).type == ColumnType.TEXT
    assert Column.from_sqlalchemy(users.c.created_at).type == ColumnType.DATETIME


def test_column_from_sqlalchemy_timestamp_and_float():
    """Subclasses map to their own types."""
    table = sa.Table(
        "readings",
        sa.MetaData(),
        sa.Column("taken", sa.TIMESTAMP),
        sa.Column("value", sa.Float),
        sa.Column("day", sa.Date),
        sa.Column("hour", sa.Time),
    )
    assert [Column.from_sqlalchemy(c).type for c in table.columns] == [
        ColumnType.TIMESTAMP,
        ColumnType.FLOAT,
        ColumnType.DATE,
        ColumnType.TIME,
    ]


def test_column_from_sqlalchemy_default():
    """Scalar defaults are kept."""
    assert Column.from_sqlalchemy(orders.c.paid).default is False
    assert Column.from_sqlalchemy(orders.c.total).default is None


def test_column_from_sqlalchemy_unsupported_type():
    """Types without a diagram counterpart are rejected."""
    column = sa.Column("payload", sa.JSON)
    with pytest.raises(UnsupportedColumnTypeError):
        Column.from_sqlalchemy(column)


def test_association_defaults():
    """Target and foreign key follow naming conventions."""
    belongs_to = Association(name="order", macro=AssociationMacro.BELONGS_TO, owner="LineItem")
    has_many = Association(name="line_items", macro=AssociationMacro.HAS_MANY, owner="Order")
    has_one = Association(name="profile", macro=AssociationMacro.HAS_ONE, owner="UserAccount")
    assert (belongs_to.klass(), belongs_to.foreign_key_name()) == ("Order", "order_id")
    assert (has_many.klass(), has_many.foreign_key_name()) == ("LineItem", "order_id")
    assert (has_one.klass(), has_one.foreign_key_name()) == ("Profile", "user_account_id")


def test_association_irregular_plurals_and_acronyms():
    """-es plurals singularize and acronym owners split into words."""
    addresses = Association(name="addresses", macro=AssociationMacro.HAS_MANY, owner="Person")
    logs = Association(name="logs", macro=AssociationMacro.HAS_MANY, owner="HTTPRequest")
    people = Association(name="people", macro=AssociationMacro.HAS_MANY, owner="Team")
    assert (addresses.klass(), addresses.foreign_key_name()) == ("Address", "person_id")
    assert (logs.klass(), logs.foreign_key_name()) == ("Log", "http_request_id")
    assert people.klass() == "Person"


def test_association_explicit_options():
    """class_name and foreign_key override the conventions."""
    association = Association(
        name="categories",
        macro=AssociationMacro.HAS_MANY,
        owner="Shop",
        class_name="Section",
        foreign_key="owner_id",
    )
    assert association.klass() == "Section"
    assert association.foreign_key_name() == "owner_id"
    assert Association(name="categories", macro="has_many", owner="Shop").klass() == "Category"


def test_model_declarations():
    """Declaration helpers record columns, associations and validations."""
    model = (
        Model(name="Order")
        .add_column("customer", ColumnType.REFERENCES)
        .add_column("number", "string", limit=20)
        .belongs_to("customer")
        .has_many("line_items")
        .validates_presence_of("number")
    )
    assert [c.name for c in model.columns] == ["customer_id", "number"]
    assert model.column("customer_id").type == ColumnType.INTEGER
    assert model.column("missing") is None
    assert [a.name for a in model.reflect_on_all_associations()] == ["customer", "line_items"]
    assert [a.name for a in model.reflect_on_all_associations(AssociationMacro.HAS_MANY)] == [
        "line_items"
    ]
    assert [v.kind for v in model.validators_on("number")] == [ValidationKind.PRESENCE]
    assert model.validators_on("customer_id") == []


def test_validates_without_presence_records_nothing():
    """Only presence validations are tracked."""
    model = Model(name="Order").validates("number", length={"maximum": 20})
    assert model.validations == []


def test_model_from_table():
    """Tables become models with belongs_to for every foreign key."""
    model = Model.from_table("Order", orders)
    assert model.table_name == "orders"
    assert model.primary_key == "id"
    assert [c.name for c in model.columns] == ["id", "user_id", "total", "paid", "receipt"]

    association = model.associations[0]
    assert association.macro == AssociationMacro.BELONGS_TO
    assert association.klass() == "User"
    assert association.foreign_key_name() == "user_id"


def test_model_from_table_classifies_attributes():
    """Reflected models classify like declared ones."""
    model = Model.from_table("Order", orders)
    attributes = {a.name: a for a in Attribute.from_model(None, model)}
    assert attributes["id"].is_primary_key() is True
    assert attributes["user_id"].is_foreign_key() is True
    assert attributes["user_id"].is_mandatory() is True
    assert attributes["receipt"].type_description() == "binary"


def test_model_from_table_with_composite_key():
    """Composite primary keys are left out."""
    model = Model.from_table("OrderTag", order_tags)
    assert model.primary_key is None
