"""Promise chaining: debugging nested asynchronous flows."""

from schemas.patterns import CodeExample, Implementation, Pattern, PatternCategory

TYPESCRIPT_IMPLEMENTATION = """\
// Real-world example: checkout flow with inventory check, payment and order creation
interface CartItem {
  productId: string;
  quantity: number;
}

interface PaymentResult {
  transactionId: string;
  status: 'success' | 'failed';
  amount: number;
}

class CheckoutService {
  private logger = console;

  async processCheckout(userId: string, items: CartItem[]): Promise<Order> {
    try {
      // Step 1: check inventory for every item in parallel
      const checks = await Promise.all(
        items.map(async item => {
          const inventory = await this.inventoryAPI.check(item.productId);
          return { ...item, available: inventory.quantity >= item.quantity };
        })
      );
      const missing = checks.filter(check => !check.available);
      if (missing.length > 0) {
        throw new Error(`Items out of stock: ${missing.map(m => m.productId).join(', ')}`);
      }

      // Step 2: charge the customer
      const total = await this.calculateTotal(items);
      const payment: PaymentResult = await this.paymentAPI.charge({ userId, amount: total });
      if (payment.status === 'failed') {
        throw new Error(`Payment failed for transaction ${payment.transactionId}`);
      }

      // Step 3: create the order, then release inventory
      const order = await this.orderAPI.create({ userId, items, paymentId: payment.transactionId });
      await Promise.all(items.map(i => this.inventoryAPI.decrease(i.productId, i.quantity)));

      this.logger.info('Checkout completed', { orderId: order.orderId, userId, total });
      return order;
    } catch (error) {
      this.logger.error('Checkout failed', {
        userId,
        error: error instanceof Error ? error.message : 'Unknown error'
      });
      await this.handleCheckoutError(error, userId, items);
      throw error;
    }
  }

  private async handleCheckoutError(error: unknown, userId: string, items: CartItem[]) {
    this.logger.warn('Rolling back checkout', { userId, items: items.length, error });
    // Refund payment, restore inventory, mark the order as failed
  }
}
"""

PYTHON_IMPLEMENTATION = """\
# Real-world example: checkout flow with inventory check, payment and order creation
import asyncio
import logging
from dataclasses import dataclass
from typing import List


@dataclass
class CartItem:
    product_id: str
    quantity: int


class CheckoutError(Exception):
    \"\"\"Base exception for checkout failures.\"\"\"


class InventoryError(CheckoutError):
    pass


class PaymentError(CheckoutError):
    pass


class CheckoutService:
    def __init__(self, inventory_api, payment_api, order_api):
        self.inventory_api = inventory_api
        self.payment_api = payment_api
        self.order_api = order_api
        self.logger = logging.getLogger(__name__)

    async def process_checkout(self, user_id: str, items: List[CartItem]):
        try:
            # Step 1: check inventory in parallel
            levels = await asyncio.gather(
                *[self.inventory_api.check(item.product_id) for item in items]
            )
            missing = [
                item.product_id
                for item, level in zip(items, levels)
                if level.quantity < item.quantity
            ]
            if missing:
                raise InventoryError(f"Items out of stock: {', '.join(missing)}")

            # Step 2: charge the customer
            total = await self._calculate_total(items)
            payment = await self.payment_api.charge(user_id=user_id, amount=total)
            if payment.status != "success":
                raise PaymentError(f"Payment failed: {payment.transaction_id}")

            # Step 3: create the order, then release inventory
            order = await self.order_api.create(user_id, items, payment.transaction_id)
            await asyncio.gather(
                *[self.inventory_api.decrease(i.product_id, i.quantity) for i in items]
            )
            self.logger.info("Checkout completed", extra={"order_id": order.order_id})
            return order
        except Exception as error:
            self.logger.error(
                "Checkout failed", extra={"user_id": user_id}, exc_info=True
            )
            await self._handle_checkout_error(error, user_id, items)
            raise
"""

ASYNC_PROMISE_HELL = Pattern(
    id="async-promise-hell",
    title="Promise Chaining",
    description=(
        "Visualize and debug complex asynchronous flows and promise chains for "
        "structured reasoning and step-by-step task completion."
    ),
    category=PatternCategory.WORKFLOW,
    diagram="https://raw.githubusercontent.com/noah-ing/Debug-Pics/refs/heads/main/mermaid-diagram-2025-01-09-222927.svg",
    use_cases=[
        "Complex data fetching workflows",
        "Multi-step form submissions",
        "Dependent API calls",
        "Resource cleanup chains",
    ],
    implementation=Implementation(
        typescript=TYPESCRIPT_IMPLEMENTATION,
        python=PYTHON_IMPLEMENTATION,
    ),
    code_examples=[
        CodeExample(
            title="Common Promise Chain Issues",
            language="typescript",
            code="""\
// ❌ Common Issues in Promise Chains
async function processOrder(orderId: string) {
  // Issue 1: No error handling
  const order = await fetchOrder(orderId);
  const user = await fetchUser(order.userId);
  await processPayment(order.amount);

  // Issue 2: Sequential requests that could be parallel
  const items = [];
  for (const itemId of order.itemIds) {
    const item = await fetchItem(itemId);
    items.push(item);
  }

  // Issue 3: No cleanup on failure
  await updateInventory(items);
  await sendConfirmation(user.email);
}
""",
            explanation=(
                "Common issues include lack of error handling, inefficient "
                "sequential requests, and missing cleanup logic."
            ),
        ),
        CodeExample(
            title="Improved Promise Chain",
            language="typescript",
            code="""\
// ✅ Better Promise Chain Implementation
async function processOrder(orderId: string) {
  let inventoryUpdated = false;
  let items: Item[] = [];

  try {
    const order = await fetchOrder(orderId);
    const [user, payment] = await Promise.all([
      fetchUser(order.userId),
      retry(() => processPayment(order.amount), { maxAttempts: 3 })
    ]);

    // Fetch items in parallel
    items = await Promise.all(order.itemIds.map(fetchItem));

    await updateInventory(items);
    inventoryUpdated = true;

    await sendConfirmation(user.email);
    logger.info('Order processed successfully', { orderId, paymentId: payment.id });
  } catch (error) {
    logger.error('Order processing failed', { orderId, error });
    if (inventoryUpdated) {
      await rollbackInventory(items);
    }
    throw error;
  }
}
""",
            explanation=(
                "This improved version includes parallel requests, proper error "
                "handling, cleanup logic, and logging."
            ),
        ),
    ],
    best_practices=[
        "Use Promise.all() for parallel operations when requests are independent",
        "Implement proper error handling with specific error types",
        "Add logging for debugging and monitoring",
        "Include cleanup/rollback logic for failures",
        "Use transactions for related operations",
        "Implement retry logic for transient failures",
        "Add proper TypeScript types for better maintainability",
    ],
    common_pitfalls=[
        "Running requests sequentially when they could be parallel",
        "Missing error handling or using generic catch-all handlers",
        "Not implementing cleanup logic for partial failures",
        "Forgetting to log important events and errors",
        "Not handling edge cases in the business logic",
        "Missing type definitions leading to runtime errors",
    ],
)
