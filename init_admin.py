"""
初始化管理员
将指定身份设为管理员，并输出一个开发用访问令牌
用法: python init_admin.py <identity>
"""
import asyncio
import sys

from scripthub.core.security import create_access_token
from scripthub.infrastructure.database import dispose_engine, get_session, init_db
from scripthub.modules.access import RoleService


async def create_default_admin(identity: str) -> None:
    """授予管理员角色"""
    await init_db()

    async for db in get_session():
        service = RoleService.with_session(db)
        promoted = await service.seed_admins([identity])

    await dispose_engine()

    if not promoted:
        print(f"{identity} 已经是管理员,无需初始化")
    else:
        print("=" * 50)
        print("管理员角色授予成功!")
        print("=" * 50)
        print(f"身份: {identity}")
    print(f"开发令牌: {create_access_token(identity)}")
    print("=" * 50)


if __name__ == "__main__":
    if len(sys.argv) != 2 or not sys.argv[1].strip():
        print("用法: python init_admin.py <identity>")
        sys.exit(1)
    asyncio.run(create_default_admin(sys.argv[1].strip()))
