"""Root GraphQL schema merging the queries and mutations of each app."""

import strawberry
from strawberry.tools import merge_types

from storefront.item.schema import Mutation as ItemMutation
from storefront.item.schema import Query as ItemQuery
from storefront.order.schema import Mutation as OrderMutation
from storefront.order.schema import Query as OrderQuery
from storefront.user.schema import Mutation as UserMutation
from storefront.user.schema import Query as UserQuery
from strawberry_django.optimizer import DjangoOptimizerExtension

Query = merge_types(
    "Query",
    (
        ItemQuery,
        OrderQuery,
        UserQuery,
    ),
)
"""Root Query type.

- Item queries: item, items, itemsConnection
- Order queries: order, orders
- User queries: me, users
"""

Mutation = merge_types(
    "Mutation",
    (
        ItemMutation,
        OrderMutation,
        UserMutation,
    ),
)
"""Root Mutation type.

- Item mutations: createItem, updateItem, deleteItem
- Cart mutations: addToCart, removeFromCart, createOrder
- User mutations: signup, signin, signout, requestReset, resetPassword,
  updatePermissions
"""


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    extensions=[
        DjangoOptimizerExtension,
    ],
)
