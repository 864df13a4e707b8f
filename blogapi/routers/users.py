from fastapi import APIRouter, Depends, Response

from blogapi.schemas.user import UserCreate, UserUpdate, UserPasswordUpdate, UserOut, BatchUsersOut
from blogapi.core.biz_response import BizResponse
from blogapi.service import user_svc

from blogapi.storage.database import get_user_repo
from blogapi.storage.user.user_interface import IUserRepository
from blogapi.storage.query_builder import ListParams
from blogapi.routers.params import list_params

from blogapi.core.exceptions import UserNotFound, PasswordMismatchError, InvalidSortField
from blogapi.core.logx import logger
from sqlalchemy.exc import IntegrityError

users_router = APIRouter(prefix="/users", tags=["users"])


@users_router.post("", response_model=UserOut)
def create_user(user: UserCreate, user_repo: IUserRepository = Depends(get_user_repo)):
    """
    创建用户：密码以 Argon2 哈希入库，响应中不含密码
    """
    try:
        new_user = user_svc.create_user(user_repo=user_repo, data=user)
        return BizResponse(data=new_user)
    except IntegrityError:
        return BizResponse(msg=f"email {user.email} is already registered", status_code=409)
    except Exception as e:
        logger.exception("create_user error")
        return BizResponse(msg=str(e), status_code=500)


@users_router.get("", response_model=BatchUsersOut)
def list_users(
    params: ListParams = Depends(list_params()),
    user_repo: IUserRepository = Depends(get_user_repo),
):
    """
    分页获取用户列表
    """
    try:
        result = user_svc.list_users(user_repo=user_repo, params=params)
        return BizResponse(data=result)
    except InvalidSortField as e:
        return BizResponse(msg=str(e), status_code=400)
    except Exception as e:
        logger.exception("list_users error")
        return BizResponse(msg=str(e), status_code=500)


@users_router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, user_repo: IUserRepository = Depends(get_user_repo)):
    try:
        user = user_svc.get_user(user_repo=user_repo, user_id=user_id)
        return BizResponse(data=user)
    except UserNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("get_user error")
        return BizResponse(msg=str(e), status_code=500)


@users_router.put("/{user_id}", response_model=UserOut)
def update_user(user_id: int, payload: UserUpdate, user_repo: IUserRepository = Depends(get_user_repo)):
    """
    更新资料（整体替换，不含密码）
    """
    try:
        user = user_svc.update_user(user_repo=user_repo, user_id=user_id, data=payload)
        return BizResponse(data=user)
    except UserNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except IntegrityError:
        return BizResponse(msg=f"email {payload.email} is already registered", status_code=409)
    except Exception as e:
        logger.exception("update_user error")
        return BizResponse(msg=str(e), status_code=500)


@users_router.put("/{user_id}/password", status_code=204)
def change_password(user_id: int, payload: UserPasswordUpdate, user_repo: IUserRepository = Depends(get_user_repo)):
    """
    修改密码：旧密码不匹配返回 400
    """
    try:
        user_svc.change_password(user_repo=user_repo, user_id=user_id, data=payload)
        return Response(status_code=204)
    except UserNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except PasswordMismatchError as e:
        return BizResponse(msg=str(e), status_code=400)
    except Exception as e:
        logger.exception("change_password error")
        return BizResponse(msg=str(e), status_code=500)


@users_router.delete("/{user_id}", status_code=204)
def delete_user(user_id: int, user_repo: IUserRepository = Depends(get_user_repo)):
    try:
        user_svc.delete_user(user_repo=user_repo, user_id=user_id)
        return Response(status_code=204)
    except UserNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("delete_user error")
        return BizResponse(msg=str(e), status_code=500)
