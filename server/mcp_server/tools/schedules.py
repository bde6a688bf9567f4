import json
from mcp.server.fastmcp import FastMCP
from ..client import ae_client


def register(mcp: FastMCP):

    @mcp.tool()
    async def preview_schedule(
        total_value: float,
        installments_count: int,
        start_date: str,
    ) -> str:
        """按合同总额均分生成分期预览，取整余差计入第 1 期。

        - total_value: 合同总额
        - installments_count: 分期数
        - start_date: 首期到期日 (YYYY-MM-DD)，之后每期顺延 1 个月
        """
        result = await ae_client.preview_schedule(total_value, installments_count, start_date)
        return json.dumps(result, ensure_ascii=False, indent=2)

    @mcp.tool()
    async def reconcile_schedule(total_value: float, installments: str) -> str:
        """校验手工调整后的分期合计是否等于合同总额，返回差额。

        installments 参数是 JSON 数组字符串，每个元素包含
        sequence_index、due_date (YYYY-MM-DD)、amount。
        """
        try:
            items = json.loads(installments)
        except json.JSONDecodeError as e:
            return f"错误：installments 参数 JSON 解析失败: {e}"
        result = await ae_client.reconcile_schedule(total_value, items)
        return json.dumps(result, ensure_ascii=False, indent=2)

    @mcp.tool()
    async def settle_installment(
        installment_transaction_id: str,
        pay_date: str,
        base_amount: float,
        account_id: str,
        account_balance: float,
        interest: float = 0,
        discount: float = 0,
    ) -> str:
        """校验并计算一期分期的结算金额（实付 = 原金额 + 利息 - 折扣）。

        只做校验与计算，不会修改账户余额；返回成功与否、失败原因
        (INVALID_DISCOUNT / INSUFFICIENT_BALANCE) 及建议的扣款金额。
        """
        result = await ae_client.settle_installment({
            "installment_transaction_id": installment_transaction_id,
            "pay_date": pay_date,
            "base_amount": base_amount,
            "interest": interest,
            "discount": discount,
            "account_id": account_id,
            "account_balance": account_balance,
        })
        return json.dumps(result, ensure_ascii=False, indent=2)
