"""Fixtures compartidos: respuestas XML de Seller Center y configuración."""

from unittest.mock import MagicMock

import pytest

from sellercenter.clients.response import parse_response
from sellercenter.core.config import SellerCenterConfig


def success_response(action: str, body: str) -> bytes:
    """Envuelve un Body en un SuccessResponse."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<SuccessResponse>
  <Head>
    <RequestId></RequestId>
    <RequestAction>{action}</RequestAction>
    <ResponseType></ResponseType>
    <Timestamp>2024-01-15T10:30:00+0000</Timestamp>
  </Head>
  <Body>{body}</Body>
</SuccessResponse>""".encode("utf-8")


ERROR_RESPONSE = b"""<?xml version="1.0" encoding="UTF-8"?>
<ErrorResponse>
  <Head>
    <RequestAction>GetOrder</RequestAction>
    <ErrorType>Sender</ErrorType>
    <ErrorCode>16</ErrorCode>
    <ErrorMessage>E016: "abc" Invalid Order ID</ErrorMessage>
  </Head>
  <Body/>
</ErrorResponse>"""


ORDER_3001 = """
<Order>
  <OrderId>3001</OrderId>
  <CustomerFirstName>Ana</CustomerFirstName>
  <CustomerLastName>Pérez</CustomerLastName>
  <OrderNumber>200123</OrderNumber>
  <PaymentMethod>CashOnDelivery</PaymentMethod>
  <Remarks></Remarks>
  <DeliveryInfo></DeliveryInfo>
  <Price>1,499.90</Price>
  <GiftOption>0</GiftOption>
  <GiftMessage></GiftMessage>
  <VoucherCode></VoucherCode>
  <CreatedAt>2024-01-15 10:30:00</CreatedAt>
  <UpdatedAt>2024-01-16 08:00:00</UpdatedAt>
  <AddressUpdatedAt>2024-01-15 10:30:00</AddressUpdatedAt>
  <AddressBilling>
    <FirstName>Ana</FirstName>
    <LastName>Pérez</LastName>
    <Phone>5512345678</Phone>
    <Phone2></Phone2>
    <Address1>Av. Reforma 100</Address1>
    <CustomerEmail>ana@example.com</CustomerEmail>
    <City>CDMX</City>
    <PostCode>06600</PostCode>
    <Country>Mexico</Country>
  </AddressBilling>
  <AddressShipping>
    <FirstName>Ana</FirstName>
    <LastName>Pérez</LastName>
    <Address1>Av. Reforma 100</Address1>
    <City>CDMX</City>
    <Country>Mexico</Country>
  </AddressShipping>
  <NationalRegistrationNumber>PEAA800101</NationalRegistrationNumber>
  <ItemsCount>2</ItemsCount>
  <PromisedShippingTime>2024-01-18 12:00:00</PromisedShippingTime>
  <ExtraAttributes></ExtraAttributes>
  <Statuses>
    <Status>pending</Status>
    <Status>ready_to_ship</Status>
  </Statuses>
</Order>
"""

ORDER_3002 = """
<Order>
  <OrderId>3002</OrderId>
  <OrderNumber>200124</OrderNumber>
  <CreatedAt>2024-01-20 09:00:00</CreatedAt>
  <UpdatedAt>2024-01-20 09:00:00</UpdatedAt>
  <Statuses>
    <Status>shipped</Status>
  </Statuses>
</Order>
"""

ORDER_ITEM_501 = """
<OrderItem>
  <OrderItemId>501</OrderItemId>
  <ShopId>SHOP-1</ShopId>
  <OrderId>3001</OrderId>
  <Name>Tenis azules</Name>
  <Sku>TEN-AZ-42</Sku>
  <Variation>42</Variation>
  <ShopSku>LIN-TEN-42</ShopSku>
  <ShippingType>Dropshipping</ShippingType>
  <ItemPrice>99.90</ItemPrice>
  <PaidPrice>89.90</PaidPrice>
  <Currency>MXN</Currency>
  <WalletCredits>0.00</WalletCredits>
  <TaxAmount>12.40</TaxAmount>
  <ShippingAmount>0.00</ShippingAmount>
  <VoucherAmount>10.00</VoucherAmount>
  <VoucherCode>PROMO10</VoucherCode>
  <Status>pending</Status>
  <IsProcessable>1</IsProcessable>
  <ShipmentProvider>Estafeta</ShipmentProvider>
  <IsDigital>0</IsDigital>
  <TrackingCode></TrackingCode>
  <Reason></Reason>
  <PurchaseOrderId>0</PurchaseOrderId>
  <PurchaseOrderNumber></PurchaseOrderNumber>
  <PackageId></PackageId>
  <PromisedShippingTime>2024-01-18 12:00:00</PromisedShippingTime>
  <CreatedAt>2024-01-15 10:30:00</CreatedAt>
  <UpdatedAt>2024-01-15 10:30:00</UpdatedAt>
</OrderItem>
"""

ORDER_ITEM_502 = """
<OrderItem>
  <OrderItemId>502</OrderItemId>
  <OrderId>3001</OrderId>
  <Name>Calcetines</Name>
  <Sku>CAL-01</Sku>
  <ItemPrice>19.90</ItemPrice>
  <PaidPrice>19.90</PaidPrice>
  <Currency>MXN</Currency>
  <Status>ready_to_ship</Status>
  <TrackingCode>TRK-502</TrackingCode>
</OrderItem>
"""


@pytest.fixture
def config():
    """Configuración inmutable de prueba."""
    return SellerCenterConfig(
        endpoint="https://sellercenter.example.com",
        user_id="seller@example.com",
        api_key="b1bdb357ced10fe4e9a69840cdd4f0e9c03d77fe",
    )


@pytest.fixture
def orders_body():
    return f"<Orders>{ORDER_3001}{ORDER_3002}</Orders>"


@pytest.fixture
def order_items_body():
    return f"<OrderItems>{ORDER_ITEM_501}{ORDER_ITEM_502}</OrderItems>"


@pytest.fixture
def multiple_order_items_body():
    return f"""
<Orders>
  <Order>
    <OrderId>3001</OrderId>
    <OrderNumber>200123</OrderNumber>
    <OrderItems>{ORDER_ITEM_501}{ORDER_ITEM_502}</OrderItems>
  </Order>
  <Order>
    <OrderId>3002</OrderId>
    <OrderNumber>200124</OrderNumber>
    <OrderItems>
      <OrderItem>
        <OrderItemId>601</OrderItemId>
        <Name>Gorra</Name>
        <Status>shipped</Status>
      </OrderItem>
    </OrderItems>
  </Order>
</Orders>
"""


@pytest.fixture
def status_change_body():
    return """
<OrderItems>
  <OrderItem>
    <OrderItemId>501</OrderItemId>
    <PurchaseOrderId>7001</PurchaseOrderId>
    <PurchaseOrderNumber>PO-7001</PurchaseOrderNumber>
    <PackageId>PKG-1</PackageId>
  </OrderItem>
  <OrderItem>
    <OrderItemId>502</OrderItemId>
    <PurchaseOrderId>7001</PurchaseOrderId>
    <PurchaseOrderNumber>PO-7001</PurchaseOrderNumber>
    <PackageId>PKG-1</PackageId>
  </OrderItem>
</OrderItems>
"""


@pytest.fixture
def failure_reasons_body():
    return """
<Reasons>
  <Reason>
    <Type>canceled</Type>
    <Name>Sourcing Delay(cannot meet deadline)</Name>
  </Reason>
  <Reason>
    <Type>canceled</Type>
    <Name>Out of Stock</Name>
  </Reason>
  <Reason>
    <Type>canceled</Type>
    <Name>Wrong Price or Pricing Error</Name>
  </Reason>
</Reasons>
"""


@pytest.fixture
def make_transport():
    """Transport simulado que responde con el Body indicado."""

    def _make(action: str, body: str = "") -> MagicMock:
        transport = MagicMock()
        transport.execute.side_effect = lambda action_name, request_id, parameters=None, http_method="GET": (
            parse_response(success_response(action, body), request_id, action_name, http_status=200)
        )
        return transport

    return _make
